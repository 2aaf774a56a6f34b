DEFAULT_GUEST_NAME = "Guest"


def say_hello() -> str:
    return "Aplikasi Spring Boot Anda berjalan!"


def greet_with_name(name: str = DEFAULT_GUEST_NAME) -> str:
    """
    Saluer par le nom, renvoyé tel quel (y compris vide).
    """
    return f"Halo, {name}!"
