"""
Command table loader tests.
"""

import textwrap

import pytest

from exmap import CommandTableLoader, LookupStatus, SymbolicAction


VALID_TABLE = textwrap.dedent(
    """
    commands:
      - names: [write, w]
        syntax: "r%!+e1x"
        action: ex_write
        parameter_names: [register, command, file]
        documentation: "Write the buffer to +file+."
      - names: pydoc
        syntax: "E1"
        action: ex_pydoc
        scope: source.python
    """
)


@pytest.fixture
def loader(registry) -> CommandTableLoader:
    return CommandTableLoader(registry)


class TestLoadText:
    """Test loading tables from YAML text."""

    def test_valid_table(self, loader, registry):
        stats = loader.load_text(VALID_TABLE)

        assert stats == {"commands": 2, "errors": []}
        write = registry.lookup("w").definition
        assert write.names == ["write", "w"]
        assert write.implementation == SymbolicAction("ex_write")
        assert write.parameter_names == ("register", "command", "file")
        assert write.documentation_parameters == ["file"]

    def test_single_name_and_scope(self, loader, registry):
        loader.load_text(VALID_TABLE)
        pydoc = registry.lookup("pydoc").definition

        assert pydoc.names == ["pydoc"]
        assert pydoc.scope_selector == "source.python"
        assert registry.lookup("py", "source.ruby").status == LookupStatus.NOT_FOUND

    def test_invalid_entries_skipped(self, loader, registry):
        stats = loader.load_text(
            textwrap.dedent(
                """
                commands:
                  - names: [edit, e]
                    action: ex_edit
                  - names: [quit]
                  - names: []
                    action: ex_nothing
                  - names: [echo]
                    action: ""
                  - names: [pwd]
                    action: ex_pwd
                """
            )
        )

        assert stats["commands"] == 2
        assert len(stats["errors"]) == 3
        assert [definition.name for definition in registry] == ["edit", "pwd"]
        assert loader.errors == stats["errors"]

    def test_definition_errors_skipped(self, strict_registry):
        loader = CommandTableLoader(strict_registry)
        stats = loader.load_text(
            textwrap.dedent(
                """
                commands:
                  - names: [frob]
                    syntax: "rq"
                    action: ex_frob
                  - names: [edit]
                    syntax: "!e1x"
                    action: ex_edit
                """
            )
        )

        assert stats["commands"] == 1
        assert "frob" not in strict_registry.names_matching("")
        assert len(strict_registry) == 1

    def test_malformed_yaml(self, loader, registry):
        stats = loader.load_text("commands: [")

        assert stats["commands"] == 0
        assert len(stats["errors"]) == 1
        assert len(registry) == 0

    def test_document_not_a_mapping(self, loader, registry):
        stats = loader.load_text("- names: [edit]\n  action: ex_edit\n")

        assert stats["commands"] == 0
        assert len(stats["errors"]) == 1

    def test_non_mapping_entry_skipped(self, loader, registry):
        stats = loader.load_text(
            textwrap.dedent(
                """
                commands:
                  - write
                  - names: [quit, q]
                    action: ex_quit
                """
            )
        )

        assert stats["commands"] == 1
        assert len(stats["errors"]) == 1
        assert registry.lookup("q").definition.name == "quit"

    def test_errors_reported_per_load(self, loader, registry):
        failed = loader.load_text("commands:\n  - names: [quit]\n")
        clean = loader.load_text("commands:\n  - names: [pwd]\n    action: ex_pwd\n")

        assert len(failed["errors"]) == 1
        assert clean == {"commands": 1, "errors": []}
        assert loader.errors == failed["errors"]

    def test_empty_document(self, loader, registry):
        assert loader.load_text("") == {"commands": 0, "errors": []}


class TestLoadFile:
    """Test loading tables from files."""

    def test_load_file(self, loader, registry, tmp_path):
        path = tmp_path / "commands.yaml"
        path.write_text(VALID_TABLE)

        stats = loader.load_file(path)

        assert stats["commands"] == 2
        assert registry.lookup("wr").definition.name == "write"

    def test_missing_file(self, loader, registry, tmp_path):
        stats = loader.load_file(tmp_path / "missing.yaml")

        assert stats["commands"] == 0
        assert len(stats["errors"]) == 1
        assert len(registry) == 0
