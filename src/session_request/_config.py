import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_REQUEST_TIMEOUT,
    ENV_SESSION_COOKIE,
    ENV_USER_AGENT,
)


class Config(BaseModel):
    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    session_cookie_name: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("session_cookie_name")
    @classmethod
    def _blank_cookie_name_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Config":
        """Build a config from ``SESSION_REQUEST_*`` environment variables.

        A ``.env`` file in the working directory is loaded first unless
        ``load_env_file`` is False. Variables already set in the environment
        take precedence over the file.
        """
        if load_env_file:
            load_dotenv()

        values: dict[str, object] = {}
        timeout = os.getenv(ENV_REQUEST_TIMEOUT)
        if timeout:
            values["timeout"] = timeout
        session_cookie = os.getenv(ENV_SESSION_COOKIE)
        if session_cookie:
            values["session_cookie_name"] = session_cookie
        user_agent = os.getenv(ENV_USER_AGENT)
        if user_agent:
            values["user_agent"] = user_agent
        return cls.model_validate(values)
