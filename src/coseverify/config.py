import os
from dotenv import load_dotenv

load_dotenv()

# Relying-party policy: canonical COSE algorithm names accepted for verification
SUPPORTED_ALGORITHMS = [
    a.strip() for a in os.getenv("COSEVERIFY_ALGORITHMS", "ES256,PS256,RS256").split(",") if a.strip()
]

LOG_LEVEL = os.getenv("COSEVERIFY_LOG_LEVEL", "INFO").upper()
METRICS_ENABLED = os.getenv("COSEVERIFY_METRICS_ENABLED", "true").lower() == "true"
