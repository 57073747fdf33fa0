from .gem import by_position


def sort_gems(gems):
    """Return the gems of a name-keyed result as a list in page order."""
    return sorted(gems.values(), key=by_position)


def format_gem(gem):
    return f"{gem.name} {gem.version} {gem.url} "


def render_results(gems, long=False):
    ordered = sort_gems(gems)
    lines = [f"Found {len(ordered)} gems:"]
    for gem in ordered:
        lines.append(format_gem(gem))
        if long and gem.description:
            lines.append(f"    {gem.description}")
    return lines
