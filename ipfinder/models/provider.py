from pydantic import BaseModel, ConfigDict, field_validator

# Every URL template embeds this address; it is swapped for the target IP.
PLACEHOLDER_IP = "1.1.1.1"


class ProviderSpec(BaseModel):
    """Static description of one IP geolocation provider.

    `url_template` carries the literal placeholder address, and each `*_path`
    is a dot-separated path into the provider's JSON response.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url_template: str
    country_path: str
    city_path: str
    isp_path: str
    org_path: str

    @field_validator("url_template")
    @classmethod
    def _require_placeholder(cls, value: str) -> str:
        if PLACEHOLDER_IP not in value:
            raise ValueError(f"url_template must contain the placeholder address {PLACEHOLDER_IP}")
        return value

    def build_url(self, ip: str) -> str:
        """Substitute the target IP for every occurrence of the placeholder."""
        return self.url_template.replace(PLACEHOLDER_IP, ip)
