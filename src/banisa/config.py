import os


class Settings:
    PROJECT_NAME: str = "banisa"
    LOG_DIR: str = os.environ.get("BANISA_LOG_DIR", "log")
    LOG_FILE: str = "banisa.log"
    CORPUS_FILE: str = os.environ.get("BANISA_CORPUS_FILE", "data/quiz_data.csv")
    TIME_LIMIT_SECONDS: int = 5 * 60
    TICK_INTERVAL_SECONDS: float = 1.0
    QUESTION_MODE: str = os.environ.get("BANISA_QUESTION_MODE", "shuffled")
    # 0 keeps every clue for the chosen word
    MAX_QUESTIONS: int = int(os.environ.get("BANISA_MAX_QUESTIONS", "0"))


settings = Settings()
