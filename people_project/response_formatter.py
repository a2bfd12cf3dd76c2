"""
Standardized API Responses for the person service

Every response body has the shape:
{
    "status": "success" | "error",
    "message": "human readable outcome",
    "data": {...} | [...] | null
}

Views build bodies with success_response / error_response. Anything that
reaches the renderer unformatted (DRF parse errors, 404/405 from the
framework) is wrapped by StandardizedJSONRenderer.
"""
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler


def custom_exception_handler(exc, context):
    """Run DRF's handler, then rewrite its body into the standard error shape."""
    response = exception_handler(exc, context)
    if response is not None:
        response.data = format_error_response(response.data)
    return response


def format_error_response(errors):
    """
    Collapse DRF error payloads into one message.

    {"name": ["This field is required."]} -> "name: This field is required."
    {"detail": "Not found."}              -> "Not found."
    """
    if isinstance(errors, dict):
        if set(errors) == {'detail'}:
            message = str(errors['detail'])
        else:
            parts = []
            for field, field_errors in errors.items():
                if isinstance(field_errors, (list, tuple)):
                    parts.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
                else:
                    parts.append(f"{field}: {field_errors}")
            message = "; ".join(parts)
    elif isinstance(errors, (list, tuple)):
        message = ", ".join(str(e) for e in errors)
    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": None,
    }


class StandardizedJSONRenderer(JSONRenderer):
    """JSON renderer that wraps bodies not already in the standard shape."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None

        if response is not None and response.status_code == 204:
            return b''

        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data)
            else:
                data = {
                    "status": "success",
                    "message": "",
                    "data": data,
                }

        return super().render(data, accepted_media_type, renderer_context)

    @staticmethod
    def is_already_formatted(data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= set(data)


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build a standardized success response.

    Usage:
        return success_response(
            data={'id': person_id},
            message="Person created successfully",
            status_code=status.HTTP_201_CREATED
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data,
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Build a standardized error response.

    Usage:
        return error_response(
            message="Failed to get person by ID",
            data={'details': str(exc)},
            status_code=status.HTTP_400_BAD_REQUEST
        )
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data,
    }, status=status_code)
