from gemsearch.utils.gem import Gem
from gemsearch.utils.output import format_gem, render_results, sort_gems


def _gems(*gems):
    return {g.name: g for g in gems}


def test_sort_gems_by_position():
    gems = _gems(Gem(name="c", position=3), Gem(name="a", position=1), Gem(name="b", position=2))
    assert [g.name for g in sort_gems(gems)] == ["a", "b", "c"]


def test_format_gem_keeps_trailing_space():
    gem = Gem(name="foo", version="1.0", url="http://rubygems.org/gems/foo", position=1)
    assert format_gem(gem) == "foo 1.0 http://rubygems.org/gems/foo "


def test_format_gem_with_empty_version():
    gem = Gem(name="foo", url="http://rubygems.org/gems/foo", position=1)
    assert format_gem(gem) == "foo  http://rubygems.org/gems/foo "


def test_render_results():
    gems = _gems(
        Gem(name="bar", version="2.0", url="u/bar", description="Bar.", position=4),
        Gem(name="foo", version="1.0", url="u/foo", position=2),
    )
    assert render_results(gems) == ["Found 2 gems:", "foo 1.0 u/foo ", "bar 2.0 u/bar "]


def test_render_results_long_format():
    gems = _gems(
        Gem(name="foo", version="1.0", url="u/foo", description="Foo.", position=1),
        Gem(name="bar", version="2.0", url="u/bar", position=2),
    )
    assert render_results(gems, long=True) == [
        "Found 2 gems:",
        "foo 1.0 u/foo ",
        "    Foo.",
        "bar 2.0 u/bar ",
    ]


def test_render_empty_results():
    assert render_results({}) == ["Found 0 gems:"]
