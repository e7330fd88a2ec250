# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reference-graph checks for HyperLIR programs.

These checks run after semantic analysis, on declarations whose references
are known to resolve, and guard the recursive compilation stages against
inputs they cannot finish on.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hyperlir.model.declarations import ArrayDecl, Declaration, RuleDecl, RuleRef, StateDecl, VarRef, rule_parts

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue: the program compiles, but probably not as intended.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue that prevents the program from being compiled.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the reference checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that block compilation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(declarations: list[Declaration]) -> ValidationResult:
    """Run all reference checks on a semantically valid declaration sequence.

    Checks performed:

    1. **State reference cycles** (error): a state whose source names another
       state, directly or through a chain, that leads back to itself.

    2. **Rule reference cycles** (error): a rule that references itself
       through a chain of ``@rule`` items.

    3. **Duplicate names** (warning): an array, rule or state declared more
       than once. The last declaration wins.

    4. **Unused declarations** (warning): arrays and rules that no rule or
       state refers to.

    Args:
        declarations: The declarations to check.

    Returns:
        A :class:`ValidationResult` with any warnings and errors found.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_state_cycles(declarations))
    errors.extend(_check_rule_cycles(declarations))
    warnings.extend(_check_duplicates(declarations))
    warnings.extend(_check_unused(declarations))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _find_cycle(references: dict[str, list[str]]) -> list[str] | None:
    """Return the first reference cycle as ``[a, b, a]``, or None.

    Names that only appear as targets have no outgoing references.
    """
    finished: set[str] = set()
    trail: list[str] = []

    def _walk(name: str) -> list[str] | None:
        trail.append(name)
        for target in references.get(name, []):
            if target in trail:
                return trail[trail.index(target) :] + [target]
            if target not in finished:
                cycle = _walk(target)
                if cycle is not None:
                    return cycle
        trail.pop()
        finished.add(name)
        return None

    for name in references:
        if name not in finished:
            cycle = _walk(name)
            if cycle is not None:
                return cycle
    return None


def _check_state_cycles(declarations: list[Declaration]) -> list[ValidationError]:
    """Return an error if state sources form a cycle."""
    array_names = {d.name for d in declarations if isinstance(d, ArrayDecl)}
    graph: dict[str, list[str]] = {}
    for decl in declarations:
        if not isinstance(decl, StateDecl):
            continue
        # An array of the same name shadows a state, so it ends the chain.
        if isinstance(decl.source, str) and decl.source not in array_names:
            graph[decl.name] = [decl.source]
        else:
            graph[decl.name] = []

    cycle = _find_cycle(graph)
    if cycle is None:
        return []
    return [ValidationError(message=f"State reference cycle detected: {' -> '.join(cycle)}.")]


def _check_rule_cycles(declarations: list[Declaration]) -> list[ValidationError]:
    """Return an error if rules reference each other in a cycle."""
    graph: dict[str, list[str]] = {}
    for decl in declarations:
        if isinstance(decl, RuleDecl):
            graph[decl.name] = [item.name for item in rule_parts(decl.body) if isinstance(item, RuleRef)]

    cycle = _find_cycle(graph)
    if cycle is None:
        return []
    return [ValidationError(message=f"Rule reference cycle detected: {' -> '.join(cycle)}.")]


def _check_duplicates(declarations: list[Declaration]) -> list[ValidationWarning]:
    """Return one warning per name declared more than once in its namespace."""
    warnings: list[ValidationWarning] = []
    for kind, decl_type in (("Array", ArrayDecl), ("Rule", RuleDecl), ("State", StateDecl)):
        seen: set[str] = set()
        reported: set[str] = set()
        for decl in declarations:
            if not isinstance(decl, decl_type):
                continue
            if decl.name in seen and decl.name not in reported:
                warnings.append(
                    ValidationWarning(
                        message=f"{kind} '{decl.name}' is declared more than once; the last declaration wins."
                    )
                )
                reported.add(decl.name)
            seen.add(decl.name)
    return warnings


def _check_unused(declarations: list[Declaration]) -> list[ValidationWarning]:
    """Return warnings for arrays and rules nothing refers to."""
    used_arrays: set[str] = set()
    used_rules: set[str] = set()
    for decl in declarations:
        if isinstance(decl, RuleDecl):
            items = rule_parts(decl.body)
        elif isinstance(decl, StateDecl):
            items = rule_parts(decl.rule)
            if isinstance(decl.source, str):
                used_arrays.add(decl.source)
        else:
            continue
        used_arrays.update(item.name for item in items if isinstance(item, VarRef))
        used_rules.update(item.name for item in items if isinstance(item, RuleRef))

    warnings: list[ValidationWarning] = []
    reported: set[str] = set()
    for decl in declarations:
        if isinstance(decl, ArrayDecl) and decl.name not in used_arrays and decl.name not in reported:
            warnings.append(ValidationWarning(message=f"Array '{decl.name}' is never used."))
            reported.add(decl.name)
        elif isinstance(decl, RuleDecl) and decl.name not in used_rules and f"@{decl.name}" not in reported:
            warnings.append(ValidationWarning(message=f"Rule '{decl.name}' is never used."))
            reported.add(f"@{decl.name}")
    return warnings
