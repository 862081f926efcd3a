"""Compile-time rewriting of JSX style props into theme-aware css declarations."""

# Backends
from style_props.backends import EmotionBackend as EmotionBackend
from style_props.backends import StyledComponentsBackend as StyledComponentsBackend
from style_props.backends import StylingBackend as StylingBackend
from style_props.backends import get_backend as get_backend

# Builders
from style_props.builders import build_attribute_buckets as build_attribute_buckets
from style_props.builders import build_theme_expression as build_theme_expression
from style_props.builders import flatten_buckets as flatten_buckets

# Config
from style_props.config import StylePropsConfig as StylePropsConfig

# Context
from style_props.context import PassThroughRegistry as PassThroughRegistry
from style_props.context import TransformContext as TransformContext

# Errors
from style_props.errors import ConfigError as ConfigError
from style_props.errors import MalformedVariantValue as MalformedVariantValue
from style_props.errors import MissingReturnInMergeTarget as MissingReturnInMergeTarget
from style_props.errors import NodeTransformError as NodeTransformError
from style_props.errors import StylePropsError as StylePropsError

# Merge
from style_props.merge import merge_declarations as merge_declarations

# Nodes
from style_props.nodes import UNDEFINED as UNDEFINED
from style_props.nodes import Array as Array
from style_props.nodes import ArrayPattern as ArrayPattern
from style_props.nodes import Arrow as Arrow
from style_props.nodes import Attribute as Attribute
from style_props.nodes import Binary as Binary
from style_props.nodes import Block as Block
from style_props.nodes import Call as Call
from style_props.nodes import Declare as Declare
from style_props.nodes import Element as Element
from style_props.nodes import Expr as Expr
from style_props.nodes import ExprStmt as ExprStmt
from style_props.nodes import Function as Function
from style_props.nodes import Identifier as Identifier
from style_props.nodes import Literal as Literal
from style_props.nodes import Member as Member
from style_props.nodes import Node as Node
from style_props.nodes import Object as Object
from style_props.nodes import ObjectPattern as ObjectPattern
from style_props.nodes import Return as Return
from style_props.nodes import SourceLocation as SourceLocation
from style_props.nodes import Spread as Spread
from style_props.nodes import SpreadAttribute as SpreadAttribute
from style_props.nodes import Stmt as Stmt
from style_props.nodes import Subscript as Subscript
from style_props.nodes import Template as Template
from style_props.nodes import Ternary as Ternary
from style_props.nodes import Unary as Unary
from style_props.nodes import emit as emit

# Classification
from style_props.resolve import RESOLUTION_ORDER as RESOLUTION_ORDER
from style_props.resolve import resolve_attribute as resolve_attribute

# Transform
from style_props.transform import StylePropsTransformer as StylePropsTransformer
from style_props.transform import TransformResult as TransformResult
from style_props.transform import TransformRun as TransformRun
from style_props.transform import transform_element as transform_element

# Tree walking
from style_props.visitor import rename_identifier as rename_identifier
from style_props.visitor import walk as walk
