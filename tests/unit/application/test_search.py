"""Unit tests for search query options and result containers."""
import pytest

from mp_search.application.pagination import Page, PageRequest
from mp_search.application.search import (
    FacetFieldEntry,
    FacetOptions,
    FacetQueryEntry,
    FacetSort,
    Field,
    Highlight,
    HighlightEntry,
    ResultPage,
    SearchQuery,
    SupportsFacetOptions,
)
from mp_search.kernel.errors import ValidationError


class TestField:
    def test_identity_is_name(self):
        assert Field("category") == Field("category")
        assert hash(Field("category")) == hash(Field("category"))

    def test_case_sensitive(self):
        assert Field("Category") != Field("category")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Field("")

    def test_str(self):
        assert str(Field("price")) == "price"


class TestFacetOptions:
    def test_defaults(self):
        options = FacetOptions()
        assert options.page_request == PageRequest(page=1, size=10)
        assert options.min_count == 1
        assert options.sort is FacetSort.COUNT
        assert not options.has_facets

    def test_string_fields_normalized(self):
        options = FacetOptions(fields=("category", Field("brand")))
        assert options.fields == (Field("category"), Field("brand"))
        assert options.has_fields

    def test_queries(self):
        options = FacetOptions(queries=["price:[0 TO 10]"])
        assert options.queries == ("price:[0 TO 10]",)
        assert options.has_queries
        assert options.has_facets

    def test_negative_min_count_rejected(self):
        with pytest.raises(ValidationError):
            FacetOptions(min_count=-1)


class TestSearchQuery:
    def test_no_facet_options(self):
        assert not SearchQuery(page=2).has_facet_options()

    def test_options_without_facets(self):
        assert not SearchQuery(facet_options=FacetOptions()).has_facet_options()

    def test_with_facet_fields(self):
        q = SearchQuery(facet_options=FacetOptions(fields=("category",)))
        assert q.has_facet_options()

    def test_satisfies_protocol(self):
        assert isinstance(SearchQuery(), SupportsFacetOptions)


class TestEntries:
    def test_facet_field_entry_key(self):
        entry = FacetFieldEntry(Field("category"), "books", 10)
        assert entry.key == Field("category")
        assert entry.value == "books"
        assert entry.count == 10

    def test_facet_query_entry_value(self):
        entry = FacetQueryEntry("price:[0 TO 10]", 5)
        assert entry.value == "price:[0 TO 10]"

    def test_highlight_entry_starts_empty(self):
        entry = HighlightEntry("doc")
        assert entry.snippets == {}
        assert entry.highlights == []

    def test_add_snippets_appends_in_order(self):
        entry = HighlightEntry("doc")
        entry.add_snippets("title", ["<em>a</em>"])
        entry.add_snippets("title", ["<em>b</em>"])
        entry.add_snippets("body", None)
        assert entry.get_snippets("title") == ["<em>a</em>", "<em>b</em>"]
        assert entry.get_snippets("body") == []
        assert entry.highlights == [
            Highlight("title", ("<em>a</em>", "<em>b</em>")),
            Highlight("body", ()),
        ]

    def test_get_snippets_unknown_field(self):
        assert HighlightEntry("doc").get_snippets("title") == []


class TestResultPage:
    def _page(self):
        return ResultPage(items=["a", "b"], total=7, page=1, size=2)

    def test_is_page(self):
        page = self._page()
        assert isinstance(page, Page)
        assert page.total_pages == 4
        assert page.highlighted is None

    def test_with_highlighted_returns_copy(self):
        page = self._page()
        entries = [HighlightEntry("a"), HighlightEntry("b", {"title": ["x"]})]
        highlighted = page.with_highlighted(entries)
        assert highlighted is not page
        assert page.highlighted is None
        assert highlighted.highlighted == entries
        assert highlighted.items == page.items

    def test_get_highlights(self):
        page = self._page().with_highlighted([HighlightEntry("a"), HighlightEntry("b", {"title": ["x"]})])
        assert page.get_highlights("b") == {"title": ["x"]}
        assert page.get_highlights("a") == {}
        assert page.get_highlights("zzz") == {}

    def test_get_highlights_prefers_same_instance(self):
        first, second = ["a"], ["a"]
        page = ResultPage(items=[first, second], total=2, page=1, size=2).with_highlighted(
            [HighlightEntry(first, {"t": ["one"]}), HighlightEntry(second, {"t": ["two"]})]
        )
        assert page.get_highlights(second) == {"t": ["two"]}
        assert page.get_highlights(first) == {"t": ["one"]}
        assert page.get_highlights(["a"]) == {"t": ["one"]}

    def test_facet_lookup(self):
        category = Field("category")
        facet_page = Page(items=[FacetFieldEntry(category, "books", 3)], total=1, page=1, size=10)
        page = self._page().with_facets({category: facet_page}, [FacetQueryEntry("q", 1)])
        assert page.facet_fields == [category]
        assert page.get_facet_result_page("category") is facet_page
        assert page.get_facet_result_page(category) is facet_page
        assert page.facet_query_result == [FacetQueryEntry("q", 1)]

    def test_missing_facet_page_is_empty(self):
        missing = self._page().get_facet_result_page("brand")
        assert missing.items == []
        assert missing.total == 0
