from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    """予約を保持する顧客

    ID を持たず、全属性の一致で同一の顧客とみなす。
    """

    name: str
    age: int
    height_in_cm: int
