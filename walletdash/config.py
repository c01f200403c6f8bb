from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

# Load .env from repo root for local development and scripts.
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, populate_by_name=True)
    solana_rpc: str = Field(default="https://api.devnet.solana.com", alias="SOLANA_RPC")
    base_rpc: str = Field(default="https://sepolia.base.org", alias="BASE_RPC")
    eth_rpc: str = Field(default="https://ethereum-sepolia-rpc.publicnode.com", alias="ETH_RPC")
    solana_wallet: str = Field(default="925Ss7kt3Gy7oEohuxzBGt9HKtdAbFSooAveYekqvC3v", alias="SOLANA_WALLET")
    base_wallet: str = Field(default="0x3DE91DCF9D4d949237Bb77c3b2273878f9186f82", alias="BASE_WALLET")
    eth_wallet: str = Field(default="0xFf4b06E931C69e6BDCac8e59298bB570e8D19f0e", alias="ETH_WALLET")
    price_url: str = Field(
        default="https://api.coingecko.com/api/v3/simple/price?ids=ethereum&vs_currencies=usd",
        alias="ETH_PRICE_URL",
    )
    default_eth_price: float = Field(default=2500.0, alias="DEFAULT_ETH_PRICE")
    data_dir: str = Field(default="./data", alias="DATA_DIR")
    snapshot_retention: int = Field(default=90, gt=0, alias="SNAPSHOT_RETENTION")
    activity_retention: int = Field(default=60, gt=0, alias="ACTIVITY_RETENTION")
    http_timeout_seconds: float = Field(default=30.0, alias="HTTP_TIMEOUT_SECONDS")
    fetch_timeout_seconds: float = Field(default=45.0, alias="FETCH_TIMEOUT_SECONDS")
    http_retry_attempts: int = Field(default=1, alias="HTTP_RETRY_ATTEMPTS")
    http_retry_backoff_seconds: float = Field(default=1.0, alias="HTTP_RETRY_BACKOFF_SECONDS")

settings = Settings()
