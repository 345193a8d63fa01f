"""ContainerLocator tests."""

from amazon_scraper.extraction.locator import ContainerLocator


class TestLocate:
    def test_first_priority_selector_wins(self, parser, results_html):
        document = parser.parse(results_html)
        containers = ContainerLocator().locate(document)

        # The stray .s-result-item outside the result list is ignored.
        assert len(containers) == 5
        assert [c.get("data-asin") for c in containers] == ["B0001", "", "B0003", "B0004", "B0005"]

    def test_result_item_selector_before_grid_column(self, parser):
        html = """
        <div class="sg-col-inner"><h2><a href="/dp/G1">grid</a></h2></div>
        <div class="s-result-item" data-asin="R1"></div>
        <div class="s-result-item" data-asin="R2"></div>
        """
        containers = ContainerLocator().locate(parser.parse(html))

        assert [c.get("data-asin") for c in containers] == ["R1", "R2"]

    def test_grid_column_selector(self, parser):
        html = '<div class="sg-col-inner">a</div><div class="sg-col-inner">b</div><p data-asin="X">c</p>'
        containers = ContainerLocator().locate(parser.parse(html))

        assert [c.text() for c in containers] == ["a", "b"]

    def test_generic_fallback(self, parser, fallback_html):
        containers = ContainerLocator().locate(parser.parse(fallback_html))

        assert [c.get("data-asin") for c in containers] == ["B1000", "B2000"]

    def test_nothing_found(self, parser):
        containers = ContainerLocator().locate(parser.parse("<html><body><p>vazio</p></body></html>"))
        assert containers == []
