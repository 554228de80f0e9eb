from dataclasses import dataclass


@dataclass(frozen=True)
class Top10Error:
    message: str


@dataclass(frozen=True)
class SheetFetchError(Top10Error):
    tab: str


@dataclass(frozen=True)
class TransformError(Top10Error):
    tab: str


@dataclass(frozen=True)
class EmptyRankingsError(Top10Error):
    message: str = "Sheet returned no rankings"
