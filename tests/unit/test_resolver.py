"""Tests for the message resolver entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from msgbundle.localization import (
    DirectoryCatalogStore,
    Locale,
    MappingCatalogStore,
    MessageKeyNotFoundError,
)
from msgbundle.resolver import main, resolve_messages

HELLO_STORE = {
    "messages_en_US": {"USED_MESSAGE_B": "Hello,", "USED_MESSAGE_D": "World!"},
}


def _run(argv: list[str], store) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    status = main(argv, store=store, stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


def test_default_locale_prints_both_messages() -> None:
    status, out, err = _run([], MappingCatalogStore(HELLO_STORE))

    assert status == 0
    assert out == "Hello, World!\n"
    assert err == ""


def test_locale_arguments_are_case_insensitive() -> None:
    status, out, err = _run(["EN", "us"], MappingCatalogStore(HELLO_STORE))

    assert (status, out, err) == (0, "Hello, World!\n", "")


def test_single_argument_falls_back_to_default_locale() -> None:
    status, out, _ = _run(["fr"], MappingCatalogStore(HELLO_STORE))

    assert status == 0
    assert out == "Hello, World!\n"


def test_explicit_locale_uses_matching_catalog(catalog_store: DirectoryCatalogStore) -> None:
    status, out, _ = _run(["fr", "CA"], catalog_store)

    assert status == 0
    assert out == "Allô, le monde!\n"


def test_unknown_locale_without_fallback_fails_silently_on_stdout() -> None:
    status, out, err = _run(["xx", "YY"], MappingCatalogStore(HELLO_STORE))

    assert status != 0
    assert out == ""
    assert "messages" in err and "xx_YY" in err


def test_missing_second_key_produces_no_partial_line() -> None:
    store = MappingCatalogStore({"messages_en_US": {"USED_MESSAGE_B": "Hello,"}})

    status, out, err = _run([], store)

    assert status != 0
    assert out == ""
    assert "USED_MESSAGE_D" in err


def test_repeated_invocations_are_identical(catalog_store: DirectoryCatalogStore) -> None:
    first = _run(["en", "US"], catalog_store)
    second = _run(["en", "US"], catalog_store)

    assert first == second == (0, "Hello, World!\n", "")


def test_resolve_messages_raises_for_missing_key() -> None:
    store = MappingCatalogStore({"messages": {"USED_MESSAGE_D": "World!"}})

    with pytest.raises(MessageKeyNotFoundError):
        resolve_messages(store, Locale("en", "US"))


def test_catalog_dir_environment_selects_directory_store(
    monkeypatch: pytest.MonkeyPatch, data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("MSGBUNDLE_CATALOG_DIR", str(data_dir / "catalogs"))

    assert main(["fr", "FR"]) == 0
    assert capsys.readouterr().out == "Bonjour, le monde!\n"


def test_default_store_uses_packaged_bundles(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, World!\n"


def test_malformed_settings_file_exits_with_usage_error(tmp_path: Path) -> None:
    (tmp_path / "msgbundle.yaml").write_text("log_level: [unclosed\n", encoding="utf-8")

    status, out, err = _run([], MappingCatalogStore(HELLO_STORE))

    assert status == 2
    assert out == ""
    assert "Invalid YAML" in err


def test_undecodable_catalog_fails_without_output(tmp_path: Path) -> None:
    catalogs = tmp_path / "catalogs"
    catalogs.mkdir()
    (catalogs / "messages.properties").write_bytes(b"USED_MESSAGE_B=\xff\nUSED_MESSAGE_D=x\n")

    status, out, err = _run([], DirectoryCatalogStore(catalogs))

    assert status == 1
    assert out == ""
    assert "Can't read catalog messages" in err


def test_trailing_semicolon_is_kept_in_properties_values(tmp_path: Path) -> None:
    (tmp_path / "messages.properties").write_text(
        "USED_MESSAGE_B=Hello,\nUSED_MESSAGE_D=World;\n", encoding="utf-8"
    )

    status, out, _ = _run([], DirectoryCatalogStore(tmp_path))

    assert status == 0
    assert out == "Hello, World;\n"
