from pydantic import BaseModel, ConfigDict, SecretStr


class ApiAuth(BaseModel):
    """neutrinoapi.com credentials.

    Both values are stored as `SecretStr`, so `repr()` and `str()` only ever
    show a masked value. The raw secrets are read in one place: when the
    client injects the `user-id` and `api-key` headers.
    """

    model_config = ConfigDict(frozen=True)

    user_id: SecretStr
    api_key: SecretStr

    def headers(self) -> dict[str, str]:
        return {
            "user-id": self.user_id.get_secret_value(),
            "api-key": self.api_key.get_secret_value(),
        }
