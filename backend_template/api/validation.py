"""Request body validation decorator.

@validate_request inspects the view's signature. A parameter annotated with
a pydantic model is filled from the JSON body; every other parameter is
passed through from the URL rule unchanged.

    @users_bp.put("/<user_id>")
    @validate_request
    def update_user(user_id: str, data: UserUpdate):
        ...

Validation failures raise ValidationError with a list of field/message pairs
under details["errors"].
"""

import inspect
import logging
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def _format_errors(error: PydanticValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in error.errors()
    ]


def _find_model_param(func) -> tuple[str, type[BaseModel]] | None:
    for name, param in inspect.signature(func).parameters.items():
        annotation = param.annotation
        if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
            return name, annotation
    return None


def validate_request(func):
    """Validate the JSON body against the view's pydantic parameter."""
    model_param = _find_model_param(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if model_param is None:
            return func(*args, **kwargs)

        name, model_cls = model_param
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            errors = [{"field": "body", "message": "Request body must be a JSON object"}]
            logger.error(f"Validation failed: {errors}")
            raise ValidationError("Validation failed", {"errors": errors})

        try:
            kwargs[name] = model_cls.model_validate(body)
        except PydanticValidationError as e:
            errors = _format_errors(e)
            logger.error(f"Validation failed: {errors}")
            raise ValidationError("Validation failed", {"errors": errors})

        return func(*args, **kwargs)

    return wrapper
