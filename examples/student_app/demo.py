"""
Helpers for running the student directory example end-to-end.
"""

from __future__ import annotations

from typing import Any, Dict, List

from vtag import init_encoder, names_to_set, slice_with_tag, underscore_case_encoder

from .models import Student


def list_columns() -> List[str]:
    """
    Columns shown in the student list view.
    """

    init_encoder(underscore_case_encoder)
    return slice_with_tag(Student(), "", "list")


def detail_columns() -> List[str]:
    init_encoder(underscore_case_encoder)
    return slice_with_tag(Student, "", "detail")


def projection_keys(label: str) -> Dict[str, Any]:
    """
    Build a lookup of selected keys, e.g. for a document store projection.
    """

    init_encoder(underscore_case_encoder)
    return names_to_set(slice_with_tag(Student, "", label), 1)


def run_demo() -> Dict[str, List[str]]:
    views = {"list": list_columns(), "detail": detail_columns()}
    for label, columns in views.items():
        print(f"{label}: {', '.join(columns)}")
    return views


if __name__ == "__main__":  # pragma: no cover - manual demo
    run_demo()
