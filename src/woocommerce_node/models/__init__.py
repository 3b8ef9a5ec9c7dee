"""Data models for the WooCommerce node."""

from woocommerce_node.models.credentials import WooCommerceCredentials
from woocommerce_node.models.parameters import (
    CustomParameters,
    FieldParameters,
    JsonLineItems,
    JsonParameters,
    LineItemsInput,
    StructuredLineItems,
    custom_parameters_adapter,
    line_items_adapter,
)
from woocommerce_node.models.request import ApiResponse, RequestOptions

__all__ = [
    # Credentials
    "WooCommerceCredentials",
    # Requests
    "ApiResponse",
    "RequestOptions",
    # Tagged inputs
    "CustomParameters",
    "FieldParameters",
    "JsonLineItems",
    "JsonParameters",
    "LineItemsInput",
    "StructuredLineItems",
    "custom_parameters_adapter",
    "line_items_adapter",
]
