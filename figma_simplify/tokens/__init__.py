from .generator import (
    DesignTokenGenerator, generate_design_tokens, generate_css_custom_properties,
    infer_token_type, css_variable_name,
)

__all__ = [
    "DesignTokenGenerator", "generate_design_tokens", "generate_css_custom_properties",
    "infer_token_type", "css_variable_name",
]
