"""Pipeline data models shared across all stages."""

from __future__ import annotations

from dataclasses import dataclass, field

STYLES = ("minimal", "modern", "corporate", "creative")


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    template: str | None = None
    style: str | None = None            # one of STYLES
    pages: list[str] | None = None
    features: list[str] | None = None


@dataclass
class GenerationContext:
    intent: str
    pages: list[str]
    features: list[str]
    style: str
    components: list[str]


@dataclass
class ValidationError:
    message: str
    severity: str = "error"             # "error" or "critical"


@dataclass
class ValidationWarning:
    message: str
    category: str                       # "security", "style", ...


@dataclass
class ValidationResult:
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class RepairOutcome:
    code: str
    repaired: bool
    error: str | None = None


@dataclass
class GeneratedPage:
    name: str
    path: str
    code: str
    seo_title: str | None = None
    seo_description: str | None = None

    def to_dict(self):
        data = {"name": self.name, "path": self.path, "code": self.code}
        if self.seo_title is not None:
            data["seoTitle"] = self.seo_title
        if self.seo_description is not None:
            data["seoDescription"] = self.seo_description
        return data


@dataclass
class GeneratedComponent:
    name: str
    type: str
    code: str
    props: dict | None = None

    def to_dict(self):
        data = {"name": self.name, "type": self.type, "code": self.code}
        if self.props is not None:
            data["props"] = self.props
        return data


@dataclass
class GenerationResponse:
    success: bool
    pages: list[GeneratedPage] = field(default_factory=list)
    components: list[GeneratedComponent] = field(default_factory=list)
    error: str | None = None
    warnings: list[str] = field(default_factory=list)
    repair_failed: bool = False

    def to_dict(self):
        """Serialize to the camelCase JSON shape returned over HTTP."""
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "pages": [p.to_dict() for p in self.pages],
            "components": [c.to_dict() for c in self.components],
            "warnings": list(self.warnings),
            "repairFailed": self.repair_failed,
        }
