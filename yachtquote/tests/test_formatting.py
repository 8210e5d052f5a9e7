import pytest

from yachtquote.core.errors import InvalidQuoteInput
from yachtquote.services.pricing import DISCLAIMERS, RULE, calculate_quote, format_quote_breakdown


@pytest.mark.formatting
class TestQuoteText:

    def test_full_breakdown_text(self, med_yacht):
        q = calculate_quote(
            med_yacht, weeks=1, apa_pct=25, vat_pct=0, gratuity_pct=10,
            delivery_fee=500, extras=[{"label": "Chef", "amount": 1200}],
        )

        expected = "\n".join([
            "Charter Quote Breakdown:",
            RULE,
            "Base: €10,000",
            "APA: €2,500",
            "VAT: €0",
            "Gratuity: €1,000",
            "Delivery fee: €500",
            "Chef: €1,200",
            RULE,
            "TOTAL: €15,200",
            "",
            "* APA covers fuel, food, beverages, port fees, and other operational expenses",
            "* VAT rates vary by jurisdiction and yacht flag",
            "* All prices are indicative and subject to final confirmation",
        ])
        assert format_quote_breakdown(q) == expected

    def test_currency_symbol_follows_breakdown(self, caribbean_yacht):
        text = format_quote_breakdown(calculate_quote(caribbean_yacht))
        assert "Base: $25,000" in text
        assert "TOTAL: $31,250" in text

    def test_rule_is_24_heavy_bars(self):
        assert RULE == "━" * 24

    def test_fractional_amounts_shown_only_when_present(self, med_yacht):
        q = calculate_quote(med_yacht, vat_pct=0, extras=[{"label": "Tip jar", "amount": 10.5}])
        text = format_quote_breakdown(q)
        assert "Tip jar: €10.5" in text
        assert "TOTAL: €12,510.5" in text

    def test_negative_amounts(self, med_yacht):
        q = calculate_quote(med_yacht, vat_pct=0, extras=[{"label": "Discount", "amount": -100}])
        assert "Discount: -€100" in format_quote_breakdown(q)

    def test_disclaimers_close_the_text(self, med_yacht):
        text = format_quote_breakdown(calculate_quote(med_yacht))
        assert text.endswith("\n".join(DISCLAIMERS))
        assert text.count("TOTAL:") == 1

    def test_unknown_currency_rejected(self, yacht_factory):
        q = calculate_quote(yacht_factory(currency="ZZZ"))
        with pytest.raises(InvalidQuoteInput) as exc_info:
            format_quote_breakdown(q)
        assert exc_info.value.field == "currency"

    def test_title_from_settings(self, med_yacht, app_settings, monkeypatch):
        monkeypatch.setattr(app_settings, "QUOTE_TITLE", "Yacht Quote:")
        text = format_quote_breakdown(calculate_quote(med_yacht))
        assert text.startswith("Yacht Quote:\n" + RULE)


@pytest.mark.formatting
class TestCurrencyDigits:

    def test_zero_digit_currency_rounds_to_whole_units(self, yacht_factory):
        yacht = yacht_factory(currency="JPY", weeklyRate=1000000)
        q = calculate_quote(yacht, vat_pct=0, extras=[{"label": "Tip", "amount": 0.5}])

        text = format_quote_breakdown(q)

        assert "Tip: ¥1\n" in text
        assert "TOTAL: ¥1,250,001" in text

    def test_three_digit_currency_keeps_third_digit(self, yacht_factory):
        q = calculate_quote(yacht_factory(currency="KWD"), vat_pct=0,
                            extras=[{"label": "Port dues", "amount": 1.0625}])
        line = next(l for l in format_quote_breakdown(q).splitlines() if l.startswith("Port dues:"))
        assert line.endswith("1.063")

    def test_half_rounds_up_not_to_even(self, med_yacht):
        # 10.125 is exact in binary; half-even would give 10.12
        q = calculate_quote(med_yacht, vat_pct=0, extras=[{"label": "Ice", "amount": 10.125}])
        assert "Ice: €10.13" in format_quote_breakdown(q)

    def test_lower_case_code_accepted(self, yacht_factory):
        q = calculate_quote(yacht_factory(currency="eur"))
        text = format_quote_breakdown(q)
        assert "Base: €10,000" in text
        assert "TOTAL: €15,250" in text
