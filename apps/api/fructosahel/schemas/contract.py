"""Create/update contract machinery shared by every resource schema.

A resource declares a single create model. Its update model is derived from
the create model's declared fields: every field becomes optional and the
immutable identity fields are dropped. Constraints travel with the field
metadata, so editing a create model changes the update model with it.

Validation never raises for payload problems. Callers receive either the
validated model or a ``ValidationReport`` listing every violated field.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model
from pydantic.alias_generators import to_camel
from pydantic_core import ErrorDetails

CONTRACT_CONFIG = ConfigDict(alias_generator=to_camel, extra="ignore")

# Used when no catalog is supplied; other error codes keep pydantic's message.
FALLBACK_TEMPLATES = {
    "enum": "Invalid {field} '{input}': expected {expected}",
    "immutable": "{field} cannot be changed after creation",
}


class CreateContract(BaseModel):
    model_config = CONTRACT_CONFIG

    def payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UpdateContract(BaseModel):
    model_config = CONTRACT_CONFIG

    source_contract: ClassVar[type[CreateContract] | None] = None

    def payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ValidationIssue(BaseModel):
    path: str
    message: str
    code: str


class ValidationReport(BaseModel):
    issues: list[ValidationIssue]

    @property
    def paths(self) -> list[str]:
        return [issue.path for issue in self.issues]


class _TemplateParams(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _display(value: Any) -> Any:
    # Float-typed constraints come back as 0.0, 90.0, ...
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def render_issue(
    path: str,
    code: str,
    default_message: str,
    messages: Mapping[str, str] | None = None,
    **params: Any,
) -> ValidationIssue:
    template = None
    if messages is not None:
        template = messages.get(f"validation.{code}")
    if template is None:
        template = FALLBACK_TEMPLATES.get(code)
    if template is None:
        return ValidationIssue(path=path, message=default_message, code=code)

    values = _TemplateParams({key: _display(value) for key, value in params.items()})
    values["field"] = path or "payload"
    return ValidationIssue(path=path, message=template.format_map(values), code=code)


def issue_from_error(error: ErrorDetails, messages: Mapping[str, str] | None = None) -> ValidationIssue:
    path = ".".join(str(part) for part in error["loc"])
    return render_issue(
        path,
        error["type"],
        error["msg"],
        messages,
        input=error.get("input"),
        **error.get("ctx", {}),
    )


def derive_update_model(
    create_cls: type[CreateContract],
    *,
    immutable: tuple[str, ...] = (),
    name: str | None = None,
) -> type[UpdateContract]:
    unknown = set(immutable) - set(create_cls.model_fields)
    if unknown:
        raise ValueError(f"{create_cls.__name__} has no fields named {sorted(unknown)}")

    definitions: dict[str, Any] = {}
    for field_name, field_info in create_cls.model_fields.items():
        if field_name in immutable:
            continue
        annotation = field_info.annotation
        if field_info.metadata:
            annotation = Annotated[(annotation, *field_info.metadata)]
        definitions[field_name] = (
            annotation,
            Field(default=None, alias=field_info.alias, description=field_info.description),
        )

    update_name = name or create_cls.__name__.replace("Create", "Update")
    update_cls = create_model(
        update_name,
        __base__=UpdateContract,
        __module__=create_cls.__module__,
        **definitions,
    )
    update_cls.source_contract = create_cls
    return update_cls


@dataclass(frozen=True)
class ResourceSchema:
    """Paired create/update validation contract for one resource."""

    name: str
    create_model: type[CreateContract]
    update_model: type[UpdateContract]
    immutable: tuple[str, ...] = ()

    @classmethod
    def from_create(
        cls,
        name: str,
        create_cls: type[CreateContract],
        *,
        immutable: tuple[str, ...] = (),
    ) -> ResourceSchema:
        return cls(
            name=name,
            create_model=create_cls,
            update_model=derive_update_model(create_cls, immutable=immutable),
            immutable=immutable,
        )

    @property
    def immutable_aliases(self) -> tuple[str, ...]:
        fields = self.create_model.model_fields
        return tuple(fields[field_name].alias or field_name for field_name in self.immutable)

    def validate_create(
        self, raw: Any, messages: Mapping[str, str] | None = None
    ) -> CreateContract | ValidationReport:
        try:
            return self.create_model.model_validate(raw)
        except ValidationError as exc:
            return ValidationReport(issues=[issue_from_error(error, messages) for error in exc.errors()])

    def validate_update(
        self, raw: Any, messages: Mapping[str, str] | None = None
    ) -> UpdateContract | ValidationReport:
        issues: list[ValidationIssue] = []
        if isinstance(raw, Mapping):
            for alias in self.immutable_aliases:
                if alias in raw:
                    issues.append(
                        render_issue(alias, "immutable", f"{alias} cannot be changed", messages, input=raw[alias])
                    )

        try:
            value = self.update_model.model_validate(raw)
        except ValidationError as exc:
            issues.extend(issue_from_error(error, messages) for error in exc.errors())
            value = None

        if issues:
            return ValidationReport(issues=issues)
        return value
