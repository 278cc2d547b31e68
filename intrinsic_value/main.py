"""
Terminal front end for the intrinsic value service.

Usage:
    ivalue analyze AAPL
    ivalue top --limit 20
    ivalue --base-url http://host:9000 top
"""
import asyncio
import logging

import click

from intrinsic_value.config import get_settings
from intrinsic_value.schemas.analysis import StockAnalysis
from intrinsic_value.schemas.opportunity import OpportunityItem
from intrinsic_value.services.analysis_client import AnalysisClient
from intrinsic_value.services.errors import AnalysisClientError


def render_analysis(analysis: StockAnalysis) -> str:
    lines = [
        f"{analysis.company_name} ({analysis.ticker})",
        analysis.summary,
        "",
        f"Price:            {analysis.formatted_price}",
        f"Intrinsic value:  {analysis.formatted_intrinsic_value}",
        f"Discount:         {analysis.currency} {analysis.formatted_discount} ({analysis.valuation.formatted_mos})",
        f"Margin of safety: {analysis.valuation.formatted_mos}",
        f"Recommendation:   {analysis.recommendation.display_name}",
        f"Quality score:    {analysis.quality_score}",
        "",
        "Metrics",
        f"  Gross margin:      {analysis.metrics.formatted_gross_margin}",
        f"  FCF margin:        {analysis.metrics.formatted_fcf_margin}",
        f"  ROE:               {analysis.metrics.formatted_roe}",
        f"  ROIC:              {analysis.metrics.formatted_roic}",
        f"  Debt/Equity:       {analysis.metrics.formatted_debt_to_equity}",
        f"  Interest coverage: {analysis.metrics.formatted_interest_coverage}",
        "",
        "Quality checks",
    ]
    for label, passed in analysis.quality_flags.all_flags:
        lines.append(f"  [{'x' if passed else ' '}] {label}")

    v = analysis.valuation
    lines += [
        "",
        "Valuation assumptions",
        f"  Discount rate:   {v.discount_rate * 100:.1f}%",
        f"  Start growth:    {v.start_growth * 100:.1f}%",
        f"  Terminal growth: {v.terminal_growth * 100:.1f}%",
        f"  Growth years:    {v.growth_years}",
    ]
    if analysis.ai_commentary is not None:
        lines += ["", "AI commentary", analysis.ai_commentary]
    return "\n".join(lines)


def render_opportunities(items: list[OpportunityItem]) -> str:
    if not items:
        return "No opportunities available"
    lines = []
    for rank, item in enumerate(items, start=1):
        lines.append(
            f"{rank:>3}. {item.ticker:<6} {item.company_name:<32.32} "
            f"{item.formatted_price:>10}  MOS {item.formatted_mos:>5}  {item.recommendation.display_name}"
        )
    return "\n".join(lines)


@click.group()
@click.option("--base-url", default=None, help="Analysis service URL (defaults to API_BASE_URL).")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, verbose: bool) -> None:
    """Look up intrinsic value analyses and ranked opportunities."""
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    ctx.obj = AnalysisClient(base_url=base_url)


@cli.command()
@click.argument("ticker")
@click.pass_obj
def analyze(client: AnalysisClient, ticker: str) -> None:
    """Show the full analysis for TICKER."""
    try:
        analysis = asyncio.run(client.fetch_analysis(ticker))
    except AnalysisClientError as e:
        raise click.ClickException(e.message) from e
    click.echo(render_analysis(analysis))


@cli.command()
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show only the top N.")
@click.pass_obj
def top(client: AnalysisClient, limit: int | None) -> None:
    """List S&P 500 stocks ranked by value opportunity."""
    try:
        items = asyncio.run(client.fetch_top_opportunities())
    except AnalysisClientError as e:
        raise click.ClickException(e.message) from e
    if limit is not None:
        items = items[:limit]
    click.echo(render_opportunities(items))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
