from collections.abc import Iterable, Iterator

from ipfinder.models.provider import ProviderSpec

DEFAULT_PROVIDERS: tuple[ProviderSpec, ...] = (
    ProviderSpec(
        name="ipapi.co",
        url_template="https://ipapi.co/1.1.1.1/json/",
        country_path="country_name",
        city_path="city",
        # ipapi.co only exposes the owning organisation, used for both ISP and ORG.
        isp_path="org",
        org_path="org",
    ),
    ProviderSpec(
        name="ip-api.com",
        url_template="http://ip-api.com/json/1.1.1.1",
        country_path="country",
        city_path="city",
        isp_path="isp",
        org_path="org",
    ),
    ProviderSpec(
        name="ipinfo.io",
        url_template="http://ipinfo.io/1.1.1.1/json",
        country_path="country",
        city_path="city",
        isp_path="org",
        org_path="org",
    ),
    ProviderSpec(
        name="ip.qste.com",
        url_template="http://ip.qste.com/json?ip=1.1.1.1",
        country_path="country",
        city_path="city",
        isp_path="isp",
        org_path="org",
    ),
)


class ProviderRegistry:
    """Fixed, read-only list of providers used to seed a fan-out lookup.

    Order is preserved but carries no meaning: every provider is queried
    independently and results are reported in arrival order.
    """

    def __init__(self, providers: Iterable[ProviderSpec] = DEFAULT_PROVIDERS) -> None:
        self._providers = tuple(providers)

    def providers(self) -> tuple[ProviderSpec, ...]:
        return self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[ProviderSpec]:
        return iter(self._providers)
