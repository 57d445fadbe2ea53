"""End-to-end tests for the bill-split CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from bill_split.cli import app
from bill_split.exceptions import InvalidParticipantCount

runner = CliRunner()


class TestQuickSplit:
    """bill-split quick"""

    def test_three_people(self):
        result = runner.invoke(app, ["quick", "1,000", "-n", "3", "--seed", "1"])

        assert result.exit_code == 0, result.output
        assert result.output.count("250.00 IQD") == 2
        assert "500.00 IQD" in result.output
        assert "Person 3" in result.output
        assert "1,000.00 IQD" in result.output
        assert "Shares add up to the total" in result.output

    def test_default_participant_count(self):
        result = runner.invoke(app, ["quick", "500"])

        assert result.exit_code == 0, result.output
        assert "Person 2" in result.output
        assert "Person 3" not in result.output

    def test_seed_makes_output_reproducible(self):
        args = ["quick", "1750", "-n", "4", "--seed", "99"]

        assert runner.invoke(app, args).output == runner.invoke(app, args).output

    def test_custom_rounding_unit(self):
        result = runner.invoke(app, ["quick", "10", "-n", "3", "--rounding-unit", "1"])

        assert result.exit_code == 0, result.output
        assert result.output.count("3.33 IQD") == 2
        assert "3.34 IQD" in result.output

    def test_arabic_labels(self):
        result = runner.invoke(app, ["quick", "1000", "-n", "2", "--lang", "ar"])

        assert result.exit_code == 0, result.output
        assert "المجموع" in result.output
        assert "الشخص 1" in result.output

    def test_currency_from_environment(self, monkeypatch):
        monkeypatch.setenv("BILL_SPLIT_CURRENCY_CODE", "USD")

        result = runner.invoke(app, ["quick", "1000", "-n", "4"])

        assert result.exit_code == 0, result.output
        assert result.output.count("250.00 USD") == 4

    def test_zero_people_fails(self):
        result = runner.invoke(app, ["quick", "1000", "-n", "0"])

        assert result.exit_code == 1
        assert "Participant count must be at least 1" in result.output

    def test_negative_total_fails(self):
        result = runner.invoke(app, ["quick", "-n", "2", "--", "-100"])

        assert result.exit_code == 1
        assert "negative" in result.output

    def test_unparsable_total_fails(self):
        result = runner.invoke(app, ["quick", "lots"])

        assert result.exit_code == 1
        assert "Not a valid amount" in result.output

    def test_huge_total(self):
        """Totals past decimal precision are split and shown exactly."""
        result = runner.invoke(app, ["quick", "1e30", "-n", "2"])

        assert result.exit_code == 0, result.output
        assert "1,000,000,000,000,000,000,000,000,000,000.00 IQD" in result.output

    def test_verbose_reraises_original_error(self):
        result = runner.invoke(app, ["quick", "1000", "-n", "0", "--verbose"])

        assert result.exit_code == 1
        assert isinstance(result.exception, InvalidParticipantCount)

    def test_heading_is_localized(self):
        english = runner.invoke(app, ["quick", "1000"])
        turkish = runner.invoke(app, ["quick", "1000", "--lang", "tr"])

        assert "Bill Splitting" in english.output
        assert "Hesap Bölme" in turkish.output

    def test_unknown_language_fails(self):
        result = runner.invoke(app, ["quick", "1000", "--lang", "fr"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.output


class TestManualSplit:
    """bill-split manual"""

    def test_named_people(self):
        result = runner.invoke(
            app, ["manual", "1000", "-p", "Ali", "-p", "Zeynep", "-p", "Sara"]
        )

        assert result.exit_code == 0, result.output
        for name in ("Ali", "Zeynep", "Sara"):
            assert name in result.output
        assert "Person" not in result.output
        assert "1,000.00 IQD" in result.output

    def test_names_with_markup_characters(self):
        result = runner.invoke(app, ["manual", "500", "-p", "[bold]Sam", "-p", "Jo"])

        assert result.exit_code == 0, result.output
        assert "[bold]Sam" in result.output

    @patch("bill_split.cli.collect_names_interactive")
    def test_interactive_names(self, mock_collect):
        mock_collect.return_value = ["Omar", "Lina"]

        result = runner.invoke(app, ["manual", "500"])

        assert result.exit_code == 0, result.output
        mock_collect.assert_called_once_with("Enter person's name")
        assert "Omar" in result.output
        assert "Lina" in result.output

    @patch("bill_split.cli.collect_names_interactive")
    def test_interactive_cancel(self, mock_collect):
        mock_collect.return_value = None

        result = runner.invoke(app, ["manual", "500"])

        assert result.exit_code == 0
        assert "No split made" in result.output

    @patch("bill_split.cli.collect_names_interactive")
    def test_interactive_no_names_fails(self, mock_collect):
        mock_collect.return_value = []

        result = runner.invoke(app, ["manual", "500"])

        assert result.exit_code == 1
        assert "Participant count must be at least 1" in result.output

    def test_blank_names_are_dropped(self):
        result = runner.invoke(app, ["manual", "500", "-p", "  ", "-p", "Jo"])

        assert result.exit_code == 0, result.output
        assert "500.00 IQD" in result.output
