from ipfinder.models.common import LookupResult


def format_result(result: LookupResult) -> list[str]:
    """Render a result as display lines.

    ISP and ORG are shown as one combined line when they name the same
    organisation (compared case-insensitively).
    """
    lines = [
        f"URL: {result.source_url}",
        f"Country: {result.country_name}  City: {result.city}",
    ]
    if result.isp_matches_org:
        lines.append(f"ISP/ORG: {result.isp}")
    else:
        lines.append(f"ISP: {result.isp}")
        lines.append(f"ORG: {result.org}")
    return lines
