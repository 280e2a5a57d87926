"""Record types shared by the tests."""

from dataclasses import dataclass, field

from pyinicoder import FieldKind


@dataclass
class Person:
    name: str = ''
    age: int = 0


@dataclass
class Place:
    location: str = ''
    history: int = 0


@dataclass
class Configuration:
    id: int = 0
    tag: str = ''
    person: Person = field(default_factory=Person)
    place: Place = field(default_factory=Place)


@dataclass
class Scalars:
    flag: bool = False
    count: int = 0
    small: int = field(default=0, metadata={'ini': FieldKind.INT8})
    port: int = field(default=0, metadata={'ini': FieldKind.UINT16})
    ratio: float = 0.0
    weight: float = field(default=0.0, metadata={'ini': FieldKind.FLOAT})
    label: str = ''


@dataclass
class Inner:
    x: int = 0


@dataclass
class Middle:
    a: int = 0
    deep: Inner = field(default_factory=Inner)


@dataclass
class Outer:
    inner: Middle = field(default_factory=Middle)


@dataclass
class WithOptional:
    name: str = ''
    nickname: str | None = None
    extra: Person | None = None
    score: int | None = None


@dataclass
class Leaf:
    x: int = 0


@dataclass
class OptionalDeep:
    a: int = 0
    deep: Leaf | None = None


@dataclass
class OuterOptional:
    inner: OptionalDeep = field(default_factory=OptionalDeep)


@dataclass
class Nick:
    nick: str | None = None


@dataclass
class Holder:
    id: int = 0
    opt: Nick = field(default_factory=Nick)


def sample_configuration() -> Configuration:
    return Configuration(
        id=101,
        tag='mynotes',
        person=Person(name='rocky', age=21),
        place=Place(location='china', history=1000),
    )
