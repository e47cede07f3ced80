class ReservationIdCounter:
    """予約IDの採番カウンタ

    最後に採番したIDを保持し、増加のみ行う。
    複数の ReservationManager に同じインスタンスを渡すと採番を共有できる。
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Counter start cannot be negative")
        self._current = start

    @property
    def current(self) -> int:
        return self._current

    def next_id(self) -> int:
        """次に採番されるIDを返す（カウンタは進めない）"""
        return self._current + 1

    def advance(self) -> int:
        """カウンタを1つ進め、新しい値を返す"""
        self._current += 1
        return self._current
