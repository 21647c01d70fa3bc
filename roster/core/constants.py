from pathlib import Path

# Chemins racine du projet
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Chemins des données
DATA_DIR = PROJECT_ROOT / "data"
DATA_DB_DIR = DATA_DIR / "db"
DB_ROSTER = DATA_DB_DIR / "roster.duckdb"

# Base DuckDB non persistée
IN_MEMORY = ":memory:"

# Longueur maximale des colonnes firstName / lastName
NAME_MAX_LENGTH = 40
