"""Login credential checks."""


class StaticCredentials:
    """Accepts exactly one configured username/password pair."""

    def __init__(self, username: str = "admin", password: str = "1234"):
        self.username = username
        self.password = password

    def check(self, username: str, password: str) -> bool:
        return username == self.username and password == self.password
