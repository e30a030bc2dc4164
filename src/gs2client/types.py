"""Enums and type definitions for the GS2 API."""

from enum import Enum


class Region(str, Enum):
    """Public regions the platform is deployed to."""

    AP_NORTHEAST_1 = "ap-northeast-1"
    US_EAST_1 = "us-east-1"
    EU_WEST_1 = "eu-west-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"


class HttpMethod(str, Enum):
    """HTTP verbs the dispatcher issues."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
