"""
Default registry tests.
"""

import pytest

from exmap import LookupStatus, RegistryConfig, SymbolicAction, create_default_registry


@pytest.fixture(scope="module")
def default_registry():
    return create_default_registry(config=RegistryConfig())


class TestDefaultRegistry:
    """Test the bundled ex commands."""

    def test_all_commands_symbolic(self, default_registry):
        assert len(default_registry) > 0
        for definition in default_registry:
            assert isinstance(definition.implementation, SymbolicAction)

    def test_names_are_unique(self, default_registry):
        names = default_registry.names_matching("")
        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("w", "write"),
            ("wr", "write"),
            ("q", "quit"),
            ("qa", "qall"),
            ("e", "edit"),
            ("tabn", "tabedit"),
            ("ta", "tabedit"),
            ("s", "substitute"),
            ("su", "substitute"),
            ("se", "set"),
            ("setf", "setfiletype"),
            ("noh", "nohlsearch"),
            ("t", "copy"),
        ],
    )
    def test_lookup(self, default_registry, token, expected):
        result = default_registry.lookup(token)
        assert result.found
        assert result.definition.name == expected

    def test_ambiguous(self, default_registry):
        result = default_registry.lookup("n")

        assert result.status == LookupStatus.AMBIGUOUS
        assert result.candidate_names == ["new", "normal", "nohlsearch"]

    def test_scoped_commands(self, default_registry):
        assert default_registry.lookup("pyd", "source.python").definition.name == "pydoc"
        assert default_registry.lookup("pyd", "source.ruby").status == LookupStatus.NOT_FOUND
        assert default_registry.lookup("rd", "source.ruby").definition.name == "rdoc"

    def test_write_hints(self, default_registry):
        write = default_registry.lookup("write").definition

        assert default_registry.syntax_hint_for(write) == "wr[ite][!]"
        assert default_registry.usage_hint_for(write) == "[range]wr[ite][!] [+cmd] [file]"

    def test_tabedit_hint_with_prefix(self, default_registry):
        tabedit = default_registry.lookup("tabnew").definition
        assert default_registry.usage_hint_for(tabedit, prefix="tabn") == "tabnew [+cmd] [file]"

    def test_pwd_hint(self, default_registry):
        pwd = default_registry.lookup("pwd").definition
        assert default_registry.usage_hint_for(pwd) == "pw[d]"

    def test_strict_config_loads(self):
        registry = create_default_registry(config=RegistryConfig(strict_syntax=True))
        assert registry.lookup("write").found

    def test_registries_are_independent(self):
        first = create_default_registry(config=RegistryConfig())
        second = create_default_registry(config=RegistryConfig())

        first.lookup("write").definition.add_alias("sv")

        assert first.lookup("sv").found
        assert second.lookup("sv").status == LookupStatus.NOT_FOUND
