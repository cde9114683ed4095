"""
score_store.py: SQLite persistence for the best score.
"""

import sqlite3

from .constants import DB_FILE, HIGHSCORE_KEY


class ScoreStore:
    """Stores one integer, the best score, under a fixed key."""

    def __init__(self, db_file: str = DB_FILE, key: str = HIGHSCORE_KEY):
        self.key = key
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value INTEGER DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_best(self) -> int:
        """Reads the stored best score, 0 if nothing was saved yet."""
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (self.key,))
        row = self.cur.fetchone()
        return int(row[0]) if row else 0

    def save_best(self, score: int):
        """Writes the best score. A lower value never replaces a higher one."""
        self.cur.execute("""
            INSERT INTO Settings (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = MAX(value, excluded.value)
        """, (self.key, int(score)))
        self.conn.commit()

    def close(self):
        self.conn.close()
