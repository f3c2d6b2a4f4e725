from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin

from ..domain import AccessRole

JsonSchema = Dict[str, Any]


def _json_type(annotation: Any) -> str:
    if get_origin(annotation) in (Union, types.UnionType):
        # Optional[int] and friends describe the wrapped type
        annotation = next((arg for arg in get_args(annotation) if arg is not type(None)), str)
    return "integer" if annotation is int else "string"


def _parameter_schema(param: inspect.Parameter) -> JsonSchema:
    schema: JsonSchema = {"type": _json_type(param.annotation)}
    if param.default not in (inspect.Parameter.empty, None):
        schema["default"] = param.default
    return schema


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    admin_only: bool
    signature: inspect.Signature

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            schema["properties"][param.name] = _parameter_schema(param)
            if param.default is inspect.Parameter.empty:
                schema["required"].append(param.name)
        if not schema["required"]:
            schema.pop("required")
        return schema

    def allowed_for(self, role: AccessRole) -> bool:
        return role is AccessRole.ADMIN or not self.admin_only

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "admin_only": self.admin_only,
            "parameters": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
    admin_only: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            admin_only=admin_only,
            signature=inspect.signature(func, eval_str=True),
        )
        return func

    return decorator


def get_api_functions(role: Optional[AccessRole] = None) -> List[ApiFunction]:
    functions = list(REGISTRY.values())
    if role is None:
        return functions
    return [func for func in functions if func.allowed_for(role)]


def call_api(function_name: str, /, *, role: AccessRole = AccessRole.VIEWER, **kwargs: Any) -> Any:
    if function_name not in REGISTRY:
        raise KeyError(f"API function '{function_name}' is not registered.")
    api_function = REGISTRY[function_name]
    if not api_function.allowed_for(role):
        raise PermissionError(f"API function '{function_name}' requires the admin role.")
    return api_function.func(**kwargs)
