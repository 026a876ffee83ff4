import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("int_fixtures.logic")

@pytest.fixture
def table_lines(logic):
    """Render a table with the given options and return its entry lines (no header/footer)."""
    def _render(bits, window=logic.SAMPLE_WINDOW, style="plain"):
        values = logic.table_values(bits, window)
        lines = list(logic.render_document(values, bits, style))
        assert lines[0] == logic.HEADER
        assert lines[-1] == logic.FOOTER
        return lines[1:-1]
    return _render
