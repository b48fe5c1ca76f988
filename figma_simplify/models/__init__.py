from .figma import (
    RawNode, FigmaModel, NodeBase,
    CanvasNode, FrameNode, InstanceNode, GroupNode, TextNode, RectangleNode, VectorNode, GenericNode,
    Color, Paint, Effect, TypeStyle, Rectangle, StrokeWeights,
    parse_node, parse_nodes,
)
from .simplified import (
    StyleId, StyleValue, GlobalVars,
    SimplifiedNode, SimplifiedDesign, SimplifiedFill,
    SimplifiedLayout, SimplifiedTextStyle, SimplifiedStroke, SimplifiedEffects,
    GradientFill, ImageFill, PatternFill,
    ComponentProperty, ComponentDefinition, ComponentSetDefinition,
)
from .tokens import DesignToken, DesignTokens, TokenType, StoreStatistics

__all__ = [
    "RawNode", "FigmaModel", "NodeBase",
    "CanvasNode", "FrameNode", "InstanceNode", "GroupNode", "TextNode",
    "RectangleNode", "VectorNode", "GenericNode",
    "Color", "Paint", "Effect", "TypeStyle", "Rectangle", "StrokeWeights",
    "parse_node", "parse_nodes",
    "StyleId", "StyleValue", "GlobalVars",
    "SimplifiedNode", "SimplifiedDesign", "SimplifiedFill",
    "SimplifiedLayout", "SimplifiedTextStyle", "SimplifiedStroke", "SimplifiedEffects",
    "GradientFill", "ImageFill", "PatternFill",
    "ComponentProperty", "ComponentDefinition", "ComponentSetDefinition",
    "DesignToken", "DesignTokens", "TokenType", "StoreStatistics",
]
