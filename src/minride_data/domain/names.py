# domain/names.py
import numpy as np

SURNAMES = ("Nguyen", "Tran", "Le", "Pham", "Hoang", "Vo", "Dang", "Bui", "Ngo", "Truong")
MIDDLE_NAMES = ("Van", "Thi", "Duc", "Minh", "Quang", "Thanh", "Manh", "Quoc", "Hong", "Tuan")
GIVEN_NAMES = (
    "An",
    "Binh",
    "Cuong",
    "Dung",
    "Em",
    "Phong",
    "Giang",
    "Hai",
    "Khoa",
    "Lam",
    "Hoa",
    "Lan",
    "Linh",
    "Nga",
    "Huong",
    "Tam",
    "Tuan",
    "Hung",
    "Duc",
    "Thao",
)

DISTRICTS = (
    "Quan 1",
    "Quan 3",
    "Quan 5",
    "Quan 7",
    "Quan 10",
    "Quan Binh Thanh",
    "Quan Go Vap",
    "Quan Thu Duc",
    "Quan Phu Nhuan",
    "Quan Tan Binh",
)


def pick(rng: np.random.Generator, choices: tuple[str, ...]) -> str:
    return choices[int(rng.integers(0, len(choices)))]


def generate_name(rng: np.random.Generator) -> str:
    """Surname + middle token + given name, each drawn independently with replacement."""
    return f"{pick(rng, SURNAMES)} {pick(rng, MIDDLE_NAMES)} {pick(rng, GIVEN_NAMES)}"


def generate_district(rng: np.random.Generator) -> str:
    return pick(rng, DISTRICTS)
