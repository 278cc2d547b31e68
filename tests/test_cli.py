import unittest
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from intrinsic_value.main import cli, render_analysis, render_opportunities
from intrinsic_value.schemas import OpportunityItem, StockAnalysis, TopOpportunitiesResponse
from intrinsic_value.services.analysis_client import AnalysisClient
from intrinsic_value.services.errors import NetworkFailure, TickerNotFound
from payloads import analysis_payload, opportunities_payload


def _analysis(**overrides) -> StockAnalysis:
    return StockAnalysis.model_validate(analysis_payload(**overrides))


def _items() -> list[OpportunityItem]:
    return TopOpportunitiesResponse.model_validate(opportunities_payload()).items


class RenderTests(unittest.TestCase):
    def test_render_analysis(self):
        text = render_analysis(_analysis())
        self.assertIn("Apple Inc. (AAPL)", text)
        self.assertIn("USD 189.84", text)
        self.assertIn("Discount:         USD -12.50 (-7%)", text)
        self.assertIn("Watch", text)
        self.assertIn("[x] ROIC > 10%", text)
        self.assertIn("[ ] Stable FCF", text)
        self.assertNotIn("AI commentary", text)

    def test_render_analysis_with_commentary(self):
        text = render_analysis(_analysis(ai_commentary="Strong moat."))
        self.assertIn("AI commentary", text)
        self.assertIn("Strong moat.", text)

    def test_quality_checks_rendered_in_order(self):
        text = render_analysis(_analysis())
        self.assertLess(text.index("ROIC > 10%"), text.index("ROE > 12%"))
        self.assertLess(text.index("Mostly Positive FCF"), text.index("Stable FCF"))

    def test_render_opportunities_ranks_in_order(self):
        lines = render_opportunities(_items()).splitlines()
        self.assertTrue(lines[0].strip().startswith("1. AAPL"))
        self.assertTrue(lines[2].strip().startswith("3. GOOG"))

    def test_render_empty_opportunities(self):
        self.assertEqual(render_opportunities([]), "No opportunities available")


class CliTests(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_analyze(self):
        with patch.object(AnalysisClient, "fetch_analysis", new=AsyncMock(return_value=_analysis())) as fetch:
            result = self.runner.invoke(cli, ["--base-url", "http://host:9000", "analyze", "aapl"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Apple Inc. (AAPL)", result.output)
        fetch.assert_awaited_once_with("aapl")

    def test_analyze_unknown_ticker(self):
        with patch.object(AnalysisClient, "fetch_analysis", new=AsyncMock(side_effect=TickerNotFound("ZZZZ"))):
            result = self.runner.invoke(cli, ["analyze", "zzzz"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Stock ticker not found", result.output)

    def test_top_with_limit(self):
        with patch.object(AnalysisClient, "fetch_top_opportunities", new=AsyncMock(return_value=_items())):
            result = self.runner.invoke(cli, ["top", "--limit", "2"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("AAPL", result.output)
        self.assertIn("MSFT", result.output)
        self.assertNotIn("GOOG", result.output)

    def test_top_network_failure(self):
        error = NetworkFailure(ConnectionError("unreachable"))
        with patch.object(AnalysisClient, "fetch_top_opportunities", new=AsyncMock(side_effect=error)):
            result = self.runner.invoke(cli, ["top"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Network error: unreachable", result.output)

    def test_base_url_option_configures_client(self):
        seen = []

        async def fake_fetch(client_self):
            seen.append(client_self.base_url)
            return []

        with patch.object(AnalysisClient, "fetch_top_opportunities", new=fake_fetch):
            result = self.runner.invoke(cli, ["--base-url", "http://host:9000/", "top"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(seen, ["http://host:9000"])


if __name__ == "__main__":
    unittest.main()
