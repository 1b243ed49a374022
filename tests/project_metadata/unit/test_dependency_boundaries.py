"""Boundary tests for package layering."""

from __future__ import annotations

from pathlib import Path


def _package_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "openapi_spec_dsl"


def _assert_no_imports(package: str, forbidden_fragments: tuple[str, ...]) -> None:
    for module_path in sorted((_package_dir() / package).glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_fragments:
            assert fragment not in text, f"Forbidden dependency in {module_path}: {fragment}"


def test_model_does_not_import_builders_or_encoders() -> None:
    _assert_no_imports(
        "spec_model",
        (
            "openapi_spec_dsl.schema_composition",
            "openapi_spec_dsl.document_encoding",
            "openapi_spec_dsl.document_building",
            "openapi_spec_dsl.reflection_derivation",
        ),
    )


def test_composition_core_does_not_import_document_builders() -> None:
    _assert_no_imports(
        "schema_composition",
        ("openapi_spec_dsl.document_building", "openapi_spec_dsl.reflection_derivation"),
    )


def test_encoders_do_not_import_builders() -> None:
    _assert_no_imports(
        "document_encoding",
        ("openapi_spec_dsl.schema_composition", "openapi_spec_dsl.document_building"),
    )
