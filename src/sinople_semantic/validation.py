"""
Diagnostics for loaded domain data.

Queries silently leave out malformed records. Validation reports the same
problems explicitly so that content authors can fix their Turtle:

- Entanglements without a source or a target
- Entanglements pointing at IRIs that are not Constructs
- Constructs and Characters without an ``rdfs:label``
- Characters linked to unknown Constructs

Usage:
    result = validate_store(store, Vocabulary())
    if not result.is_valid:
        print(result.get_summary())
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from rdflib import URIRef

from .exceptions import ParseError
from .rdf.parser import parse_turtle
from .rdf.terms import Vocabulary
from .store import TripleStore

logger = logging.getLogger(__name__)


class Severity(Enum):
    """
    Severity levels for validation issues.

    - INFO: Informational message, no action required.
    - WARNING: The record is still returned but is incomplete.
    - ERROR: The record is left out of query results, or the text does not parse.
    """
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class IssueCategory(Enum):
    SYNTAX_ERROR = "syntax_error"
    MISSING_REQUIRED = "missing_required"
    INVALID_REFERENCE = "invalid_reference"
    MISSING_LABEL = "missing_label"


@dataclass
class ValidationIssue:
    """
    A single validation issue.

    Attributes:
        severity: Issue severity.
        category: Issue category for grouping.
        message: Human-readable description.
        location: IRI or line/column where the issue occurred.
        recommendation: Suggested fix.
    """
    severity: Severity
    category: IssueCategory
    message: str
    location: Optional[str] = None
    recommendation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "severity": self.severity.value,
            "category": self.category.value,
            "message": self.message,
        }
        if self.location:
            result["location"] = self.location
        if self.recommendation:
            result["recommendation"] = self.recommendation
        return result

    def __str__(self) -> str:
        icon = {"error": "✗", "warning": "⚠", "info": "ℹ"}[self.severity.value]
        parts = [f"{icon} [{self.category.value}] {self.message}"]
        if self.location:
            parts.append(f"  Location: {self.location}")
        if self.recommendation:
            parts.append(f"  Recommendation: {self.recommendation}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """
    Outcome of validating Turtle text or a loaded store.

    Attributes:
        source_path: File the data came from, if any.
        timestamp: When validation ran.
        is_valid: False once any ERROR issue is added.
        issues: Issues in the order they were found.
        statistics: Counts of the records that were examined.
    """
    source_path: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    is_valid: bool = True
    issues: List[ValidationIssue] = field(default_factory=list)
    statistics: Dict[str, Any] = field(default_factory=dict)

    def add_issue(
        self,
        severity: Severity,
        category: IssueCategory,
        message: str,
        location: Optional[str] = None,
        recommendation: Optional[str] = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, category, message, location, recommendation))
        if severity == Severity.ERROR:
            self.is_valid = False

    def add_error(self, category: IssueCategory, message: str, **kwargs: Any) -> None:
        self.add_issue(Severity.ERROR, category, message, **kwargs)

    def add_warning(self, category: IssueCategory, message: str, **kwargs: Any) -> None:
        self.add_issue(Severity.WARNING, category, message, **kwargs)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == Severity.WARNING)

    @property
    def issues_by_category(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for issue in self.issues:
            counts[issue.category.value] = counts.get(issue.category.value, 0) + 1
        return counts

    def get_issues_by_category(self, category: IssueCategory) -> List[ValidationIssue]:
        return [i for i in self.issues if i.category == category]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_path": self.source_path,
            "timestamp": self.timestamp,
            "is_valid": self.is_valid,
            "summary": {
                "total_issues": len(self.issues),
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
            "issues_by_category": self.issues_by_category,
            "issues": [i.to_dict() for i in self.issues],
            "statistics": self.statistics,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def get_summary(self) -> str:
        """Multi-line, human-readable report."""
        lines = ["=" * 60, "VALIDATION RESULT", "=" * 60]
        if self.source_path:
            lines.append(f"File: {self.source_path}")
        if self.is_valid:
            lines.append("✓ STATUS: VALID")
            if self.warning_count:
                lines.append(f"  (with {self.warning_count} warning(s))")
        else:
            lines.append("✗ STATUS: INVALID")
            lines.append(f"  {self.error_count} error(s) found")

        if self.statistics:
            lines.append("")
            lines.append("STATISTICS:")
            for key, value in self.statistics.items():
                lines.append(f"  {key}: {value}")

        if self.issues:
            lines.append("")
            lines.append("-" * 60)
            lines.extend(str(issue) for issue in self.issues[:20])
            if len(self.issues) > 20:
                lines.append(f"... and {len(self.issues) - 20} more issues")
        lines.append("=" * 60)
        return "\n".join(lines)


def validate_store(
    store: TripleStore,
    vocabulary: Optional[Vocabulary] = None,
    source_path: Optional[str] = None,
) -> ValidationResult:
    """
    Check the domain records held in a store.

    Args:
        store: Store to inspect. It is not modified.
        vocabulary: Ontology IRIs; defaults to the standard namespace.
        source_path: Recorded on the result for reporting.

    Returns:
        ValidationResult with one issue per problem found.
    """
    vocab = vocabulary or Vocabulary()
    result = ValidationResult(source_path=source_path)

    def is_construct(term: Any) -> bool:
        return next(store.triples(term, vocab.type, vocab.construct), None) is not None

    def instances(rdf_class: URIRef) -> List[Any]:
        return [s for s in store.subjects(vocab.type, rdf_class) if isinstance(s, URIRef)]

    constructs = instances(vocab.construct)
    for construct in constructs:
        if store.value(construct, vocab.label) is None:
            result.add_warning(
                IssueCategory.MISSING_LABEL,
                "Construct has no rdfs:label",
                location=str(construct),
                recommendation="Add an rdfs:label so the construct can be displayed",
            )

    entanglements = instances(vocab.entanglement)
    for entanglement in entanglements:
        for predicate, role in ((vocab.has_source, "source"), (vocab.has_target, "target")):
            end = next((o for o in store.objects(entanglement, predicate) if isinstance(o, URIRef)), None)
            if end is None:
                result.add_error(
                    IssueCategory.MISSING_REQUIRED,
                    f"Entanglement has no {role} IRI",
                    location=str(entanglement),
                    recommendation=f"Add an sn:has{role.capitalize()} pointing at a Construct",
                )
            elif not is_construct(end):
                result.add_error(
                    IssueCategory.INVALID_REFERENCE,
                    f"Entanglement {role} <{end}> is not a Construct",
                    location=str(entanglement),
                )

    characters = instances(vocab.character)
    for character in characters:
        if store.value(character, vocab.label) is None:
            result.add_warning(
                IssueCategory.MISSING_LABEL,
                "Character has no rdfs:label",
                location=str(character),
            )
        for linked in store.objects(character, vocab.has_construct):
            if not is_construct(linked):
                result.add_warning(
                    IssueCategory.INVALID_REFERENCE,
                    f"Character links to <{linked}>, which is not a Construct",
                    location=str(character),
                )

    result.statistics = {
        "triples": store.triple_count(),
        "constructs": len(constructs),
        "entanglements": len(entanglements),
        "characters": len(characters),
    }
    logger.info(
        f"Validation finished: {result.error_count} error(s), {result.warning_count} warning(s)"
    )
    return result


def validate_turtle(
    text: str,
    vocabulary: Optional[Vocabulary] = None,
    source_path: Optional[str] = None,
) -> ValidationResult:
    """Parse Turtle into a scratch store and validate it, reporting syntax errors as issues."""
    try:
        triples = parse_turtle(text)
    except ParseError as e:
        result = ValidationResult(source_path=source_path)
        location = None
        if e.line is not None:
            location = f"line {e.line}" if e.column is None else f"line {e.line}, column {e.column}"
        result.add_error(IssueCategory.SYNTAX_ERROR, e.message, location=location)
        return result

    store = TripleStore()
    store.load(triples)
    return validate_store(store, vocabulary, source_path=source_path)
