from pydantic import Field, BaseModel
from typing import Optional, Dict, Any
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirebaseDatabaseAuthVariableOverride(BaseModel):
    """Configuration settings for Firebase RTDB auth override."""

    uid: Optional[str] = Field(default=None, description="Firebase auth UID")
    admin: Optional[bool] = Field(default=False, description="Firebase admin")


class FirebaseOptions(BaseModel):
    """Configuration settings for Firebase RTDB options."""

    databaseURL: str = Field(..., description="Firebase Realtime Database URL")
    databaseAuthVariableOverride: Optional[FirebaseDatabaseAuthVariableOverride] = Field(
        default=None, description="Firebase auth variable override"
    )


class FirebaseSettings(BaseSettings):
    """Configuration settings for Firebase RTDB."""

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="FIREBASE_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    database_url: Optional[str] = Field(
        default=None, description="Firebase Realtime Database URL"
    )
    options: Optional[FirebaseOptions] = Field(
        default=None, description="Firebase options"
    )
    admin_sdk: Optional[str] = Field(
        default=None, description="Firebase admin SDK credentials path"
    )
    auth_uid: Optional[str] = Field(default=None, description="Firebase auth UID")

    def app_options(self) -> Dict[str, Any]:
        """
        Build the options passed to ``firebase_admin.initialize_app``.

        Explicit ``options`` win; ``database_url`` and ``auth_uid`` fill the gaps.
        """
        firebase_options: Dict[str, Any] = {}
        if self.options:
            firebase_options = self.options.model_dump(exclude_none=True)

        if 'databaseURL' not in firebase_options and self.database_url:
            firebase_options['databaseURL'] = self.database_url

        if 'databaseAuthVariableOverride' not in firebase_options and self.auth_uid:
            firebase_options['databaseAuthVariableOverride'] = {
                'uid': self.auth_uid,
                'admin': True
            }
        return firebase_options
