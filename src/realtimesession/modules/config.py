class Config:
    BASE_URL = "https://api.openai.com/v1"
    SESSIONS_PATH = "/realtime/sessions"
    API_KEY_ENV = "OPENAI_API_KEY"
    OPENAI_BETA_HEADER = "realtime=v1"
    # Seconds; applied by the transport when a request carries no timeout.
    DEFAULT_TIMEOUT = 30.0
