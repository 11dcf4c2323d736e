"""
Standardized API responses.

Every response body follows:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}

Field-level validation errors keep their structure under "data" so clients
can map them back to the submitted payload.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.base.exceptions import NotFoundError
from core.base.results import validation_error_dict


def custom_exception_handler(exc, context):
    """
    Map registry and Django errors onto DRF exceptions, then format.

    - NotFoundError -> 404
    - django ValidationError -> 400 with field errors
    Anything DRF does not handle (InvariantViolation included) propagates.
    """
    if isinstance(exc, NotFoundError):
        exc = exceptions.NotFound(exc.message)
    elif isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(validation_error_dict(exc))

    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def format_error_response(errors, status_code):
    """
    Format error responses into standard format.

    Handles various error formats:
    - {"field": ["error1", "error2"]} -> "field: error1, error2", data keeps the dict
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    message = ""
    data = None

    if isinstance(errors, dict):
        error_messages = []
        field_errors = {}
        for field, value in errors.items():
            if field == 'detail':
                message = str(value)
                continue
            field_errors[field] = value
            if isinstance(value, list):
                error_messages.append(f"{field}: {', '.join(str(e) for e in value)}")
            elif isinstance(value, dict):
                error_messages.append(f"{field}: {format_nested_errors(value)}")
            else:
                error_messages.append(f"{field}: {value}")

        if error_messages:
            message = "; ".join(error_messages)
            data = field_errors

    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)

    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": data
    }


def format_nested_errors(errors_dict):
    """Format nested error dictionaries."""
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_nested_errors(value)}")
        else:
            messages.append(f"{key}: {value}")
    return "; ".join(messages)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps every response in the standard envelope.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content has no body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= set(data)

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            message = str(data['detail'])
            response_data = None
        elif data is None or (isinstance(data, dict) and not data):
            message = ""
            response_data = None
        else:
            message = ""
            response_data = data

        return {
            "status": "success",
            "message": message,
            "data": response_data
        }


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK, headers=None):
    """
    Create a standardized success response.

    Usage:
        return success_response(
            data=serializer.data,
            message="Role created",
            status_code=status.HTTP_201_CREATED,
            headers={'Location': location}
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code, headers=headers)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Create a standardized error response.

    Usage:
        return error_response(
            message=result.first_error(),
            data=result.validation_errors,
        )
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
