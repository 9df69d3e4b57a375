import httpx
from pydantic import BaseModel
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    OLLAMA_BASE_URL: str = "http://127.0.0.1:11434"

    OLLAMA_CONNECT_TIMEOUT: float = 5.0
    OLLAMA_READ_TIMEOUT: float = 300.0
    OLLAMA_WRITE_TIMEOUT: float = 30.0
    OLLAMA_POOL_TIMEOUT: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


class OllamaConfig(BaseModel):
    url: str
    connect_timeout: float = settings.OLLAMA_CONNECT_TIMEOUT
    read_timeout: float = settings.OLLAMA_READ_TIMEOUT
    write_timeout: float = settings.OLLAMA_WRITE_TIMEOUT
    pool_timeout: float = settings.OLLAMA_POOL_TIMEOUT

    @classmethod
    def from_url(cls, url: str) -> "OllamaConfig":
        return cls(url=url.rstrip("/"))

    @classmethod
    def from_settings(cls) -> "OllamaConfig":
        return cls.from_url(settings.OLLAMA_BASE_URL)

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.pool_timeout,
        )
