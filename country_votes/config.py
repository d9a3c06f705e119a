# country_votes/config.py
# Central place for settings and constants
import os
from dotenv import load_dotenv

load_dotenv()

# HTTP port for uvicorn
PORT = int(os.getenv("PORT", "3000"))

# Base URL of the REST Countries API (must end with "/")
API_URL = os.getenv("API_URL", "https://restcountries.com/v3.1/")
if not API_URL.endswith("/"):
    API_URL += "/"

# Seconds to wait for the country API before failing the request
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10.0"))

# JSON file holding all votes - rewritten on every new vote
DB_PATH = os.getenv("DB_PATH", "data/database.json")

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if o.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Size of the leaderboard
TOP_N = 10
