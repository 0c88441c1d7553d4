import os
from pathlib import Path
from dotenv import load_dotenv

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("ORIGINALITY_ENV", "dev")
        self._load_env_file()

        # Project paths
        self.project_root = Path(__file__).parent.parent.parent
        self.corpus_file = self.project_root / os.getenv("CORPUS_FILE", "submissions.yaml")

        # Google AI settings
        self.google_ai_api_key = os.getenv("GOOGLE_AI_API_KEY")
        self.google_ai_model = os.getenv("GOOGLE_AI_MODEL", "gemini-2.0-flash")
        self.ai_timeout_seconds = float(os.getenv("AI_TIMEOUT_SECONDS", 30))

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        load_dotenv(env_file)

# Create a global config instance
config = Config()
