"""
Tests for the calculator session (assignments, keywords and history).
"""

import pytest

from core import ExpressionEvaluator
from session import CalculatorSession, Entry, is_valid_variable_name


@pytest.fixture
def session():
    return CalculatorSession(ExpressionEvaluator(), precision=6, benchmark_iterations=1)


class TestAssignment:
    """Tests for the name=expression convention."""

    def test_result_stored_in_ans(self, session):
        assert session.execute("2+2") == "4"
        assert session.evaluator.variables == {"ans": 4.0}
        assert session.execute("ans*2") == "8"

    def test_named_assignment(self, session):
        assert session.execute("x=3") == "3"
        assert session.execute("x*2") == "6"
        assert session.evaluator.variables == {"x": 3.0, "ans": 6.0}

    def test_spaces_are_ignored(self, session):
        assert session.execute(" y = 1 + 1 ") == "2"
        assert session.evaluator.variables["y"] == 2.0

    def test_all_whitespace_is_ignored(self, session):
        assert session.execute("x\t=\t1") == "1"
        assert session.evaluator.variables == {"x": 1.0}
        assert session.history[-1].expression == "x=1"

    def test_exponent_like_name_rejected(self, session):
        assert session.execute("1e=3") == "Invalid name for variable"
        assert session.execute("1e-5") == "0.00001"

    def test_reassign_ans_explicitly(self, session):
        assert session.execute("ans=7") == "7"
        assert session.evaluator.variables == {"ans": 7.0}

    @pytest.mark.parametrize("line", ["sin=1", "e=1", "π=1", "clear=1", "2=1", "a.b=1", "a-b=1", "1e5=1"])
    def test_invalid_names(self, session, line):
        assert session.execute(line) == "Invalid name for variable"
        assert session.evaluator.variables == {}

    def test_double_equals(self, session):
        assert session.execute("x==1") == "Incorrect syntax (use only one '=')"

    def test_empty_name(self, session):
        assert session.execute("=5") == "Incorrect syntax (variable name empty)"

    def test_failed_evaluation_does_not_assign(self, session):
        session.execute("x=1")
        assert session.execute("x=(2") == "Mismatched parenthesis"
        assert session.evaluator.variables == {"x": 1.0}


class TestHistory:
    """Tests for history entries."""

    def test_entries_record_results_and_errors(self, session):
        session.execute("1/4")
        session.execute("foo(1)")
        assert session.history == [
            Entry(1, "1/4", "0.25"),
            Entry(2, "foo(1)", "Unknown variable or function (foo)"),
        ]

    def test_empty_line_is_ignored(self, session):
        assert session.execute("   ") is None
        assert session.execute("\r\n") is None
        assert session.history == []

    def test_special_values_recorded_as_text(self, session):
        assert session.execute("1/0") == "Infinity"
        assert session.execute("0/0") == "NaN"
        assert session.history[-1].result == "NaN"

    def test_restore(self, session):
        session.restore([Entry(1, "1+1", "2"), Entry(5, "x=3", "3")], {"x": 3.0})
        assert session.next_id == 6
        assert session.execute("x+1") == "4"
        assert session.history[-1] == Entry(6, "x+1", "4")

    def test_restore_empty(self, session):
        session.restore([], {})
        assert session.next_id == 1


class TestKeywords:
    """Tests for keyword commands."""

    def test_clear(self, session):
        session.execute("x=1")
        assert session.execute("CLEAR") == "History and variables cleared"
        assert session.history == []
        assert session.evaluator.variables == {}
        assert session.next_id == 1

    def test_keywords_not_recorded(self, session):
        session.execute("print")
        session.execute("help")
        assert session.history == []

    def test_precision(self, session):
        assert session.execute("precision=2") == "Precision set to 2 decimal places"
        assert session.execute("1/3") == "0.33"

    def test_precision_zero(self, session):
        session.execute("precision=0")
        assert session.execute("2.5") == "2"

    def test_precision_out_of_range(self, session):
        assert session.execute("precision=11") == "Precision must be between 0 and 10"
        assert session.precision == 6

    def test_precision_not_a_number(self, session):
        assert session.execute("precision=abc") == "Invalid syntax (use precision=2 for example)"

    def test_print_variables(self, session):
        assert session.execute("print") == "No variables defined"
        session.execute("b=2")
        session.execute("a=1/3")
        assert session.execute("print") == "a = 0.333333\nb = 2"

    def test_help_lists_functions(self, session):
        text = session.execute("help")
        assert "atan2(a,b)" in text
        assert "sqrt" in text
        assert session.execute("about") == text

    def test_performance_test(self, session):
        result = session.execute("test")
        assert result.startswith("Performance test result: ")
        assert result.endswith("milliseconds on average for each evaluation")


class TestVariableNames:
    """Tests for variable name validation."""

    @pytest.mark.parametrize("name", ["x", "ans", "rate2", "_tmp", "Sin"])
    def test_valid(self, name):
        assert is_valid_variable_name(name)

    @pytest.mark.parametrize("name", ["", "cos", "atan2", "print", "e", "12", ".5", "a+b", "f(x)", "a$", "1e", "2.5E"])
    def test_invalid(self, name):
        assert not is_valid_variable_name(name)
