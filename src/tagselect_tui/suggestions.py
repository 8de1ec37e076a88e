"""Suggestion derivation: from catalog, selection and query to dropdown rows.

Suggestions are never patched in place.  Every query or selection change
derives a fresh list, so the dropdown cannot drift out of step with the
selection.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Iterator

from tagselect_tui.models import Option, SuggestionEntry, TagSelectOptions

_WHITESPACE_RE = re.compile(r"\s+")


def propose_tag_value(query: str) -> str:
    """Derive the value of a tag created from free text.

    The text is trimmed, lower-cased, and each run of whitespace becomes a
    single hyphen: ``"Red  Apple "`` becomes ``"red-apple"``.
    """
    return _WHITESPACE_RE.sub("-", query.strip().lower())


def matches_query(label: str, query: str) -> bool:
    """Return True if *label* contains *query*, ignoring case."""
    return query.lower() in label.lower()


def filter_options(
    catalog: Iterable[Option],
    selected: Collection[str],
    query: str,
) -> Iterator[Option]:
    """Yield unselected catalog options whose label matches *query*, in catalog order."""
    for option in catalog:
        if option.value in selected:
            continue
        if matches_query(option.label, query):
            yield option


def iter_suggestions(
    catalog: Iterable[Option],
    selected: Collection[str],
    query: str,
    policy: TagSelectOptions,
) -> Iterator[SuggestionEntry]:
    """Yield the dropdown rows for the current state.

    Args:
        catalog: All known options, in display order.
        selected: Currently selected values.
        query: The free-text filter typed by the user.
        policy: Options controlling limits, tag creation and row texts.

    Yields:
        ``EXISTING`` rows for every match, or exactly one synthetic row:
        ``LIMIT_REACHED`` when the selection is full, ``CREATE_NEW`` when
        nothing matches and new tags are allowed, ``NO_RESULTS`` otherwise.
    """
    if policy.max_tags is not None and len(selected) >= policy.max_tags:
        yield SuggestionEntry.limit_reached(policy.limit_reached_text)
        return

    matched = False
    for option in filter_options(catalog, selected, query):
        matched = True
        yield SuggestionEntry.existing(option)
    if matched:
        return

    label = query.strip()
    if label and policy.allow_new:
        yield SuggestionEntry.create_new(
            propose_tag_value(query), label, policy.format_create_prompt(label)
        )
    else:
        yield SuggestionEntry.no_results(policy.no_results_text)


def build_suggestions(
    catalog: Iterable[Option],
    selected: Collection[str],
    query: str,
    policy: TagSelectOptions,
) -> list[SuggestionEntry]:
    """Return the dropdown rows as a list.  See :func:`iter_suggestions`."""
    return list(iter_suggestions(catalog, selected, query, policy))
