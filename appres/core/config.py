from typing import List
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "appres"

    # Appwrite Settings
    # Older provisioning scripts exported these under other names, still accepted.
    APPWRITE_ENDPOINT_URL: str = Field(
        default="https://cloud.appwrite.io/v1",
        validation_alias=AliasChoices(
            "APPWRITE_ENDPOINT_URL", "NEXT_PUBLIC_APPWRITE_ENDPOINT", "APPWRITE_ENDPOINT"
        ),
    )
    APPWRITE_PROJECT_ID: str = Field(
        default="",
        validation_alias=AliasChoices("APPWRITE_PROJECT_ID", "NEXT_PUBLIC_APPWRITE_PROJECT"),
    )
    APPWRITE_API_KEY_APPRES: str = Field(
        default="",
        validation_alias=AliasChoices(
            "APPWRITE_API_KEY_APPRES", "APPWRITE_API_KEY_RESDEF", "APPWRITE_API_KEY"
        ),
    )
    APPWRITE_SELF_SIGNED: bool = False

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    def missing_credentials(self) -> List[str]:
        """
        Returns the names of the connection settings that are still empty.
        """
        required = {
            "APPWRITE_ENDPOINT_URL": self.APPWRITE_ENDPOINT_URL,
            "APPWRITE_PROJECT_ID": self.APPWRITE_PROJECT_ID,
            "APPWRITE_API_KEY_APPRES": self.APPWRITE_API_KEY_APPRES,
        }
        return [name for name, value in required.items() if not value]

settings = Settings()
