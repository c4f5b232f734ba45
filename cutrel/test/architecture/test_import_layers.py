from __future__ import annotations

from ._utils import iter_source_files, matches_prefix, package_root, parse_imports


def test_release_package_does_not_import_cli_or_ui_libraries() -> None:
    root = package_root()
    forbidden = ("cutrel.cli", "typer", "rich")
    offenders: list[str] = []

    for file_path in iter_source_files():
        rel = file_path.relative_to(root)
        if rel.parts[0] not in {"release", "core", "git", "platform"}:
            continue
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "Layering violations:\n" + "\n".join(offenders)


def test_rich_is_only_imported_by_console() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_source_files():
        rel = file_path.relative_to(root)
        if rel.as_posix() == "output/console.py":
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
