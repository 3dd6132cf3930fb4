"""
Structure lint tests
Verify that the package layout follows the functional core / ports / adapters split.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "handy"


class TestProjectStructure:
    """Verify project structure conventions."""

    def test_core_directories_exist(self) -> None:
        """Functional core, ports and adapters must exist."""
        assert (PACKAGE / "domain").is_dir()
        assert (PACKAGE / "ports").is_dir()
        assert (PACKAGE / "adapters").is_dir()
        assert (PACKAGE / "rules").is_dir()

    def test_component_layout(self) -> None:
        """Components carry models, ports and entry points."""
        component = PACKAGE / "components" / "toolkit"
        for name in ("__init__.py", "component.py", "models.py", "ports.py", "_impl.py"):
            assert (component / name).is_file(), f"Missing {name} in toolkit component"

    def test_init_files_present(self) -> None:
        """Python packages must have __init__.py files."""
        packages = [
            "handy",
            "handy/domain",
            "handy/ports",
            "handy/adapters",
            "handy/rules",
            "handy/components",
            "handy/components/toolkit",
        ]
        for pkg in packages:
            init_file = PROJECT_ROOT / pkg / "__init__.py"
            assert init_file.is_file(), f"Missing __init__.py in {pkg}"

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()


class TestPublicSurface:
    """The top-level package re-exports every helper."""

    def test_all_names_resolve(self) -> None:
        import handy

        for name in handy.__all__:
            assert hasattr(handy, name), name

    def test_domain_stays_pure(self) -> None:
        """Domain modules never read configuration."""
        for module in (PACKAGE / "domain").glob("*.py"):
            source = module.read_text()
            assert "handy.rules" not in source, module.name
            assert "import yaml" not in source, module.name
