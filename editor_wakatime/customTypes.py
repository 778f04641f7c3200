from enum import Enum
from typing import Any, NamedTuple, Optional, Protocol, TypedDict

from . import globals as g


class EntityType(Enum):
    FILE = 'file'
    DOMAIN = 'domain'
    APP = 'app'


class Category(Enum):
    CODING = 'coding'
    BUILDING = 'building'
    INDEXING = 'indexing'
    DEBUGGING = 'debugging'
    RUNNING = 'running'
    TESTING = 'testing'
    MANUAL = 'manual'
    WRITING = 'writing'
    DESIGNING = 'designing'
    RESEARCHING = 'researching'


class HeartbeatPayload(TypedDict):
    """
    JSON body of a heartbeat POST.
    Every key is always present, missing values are sent as null
    """
    entity: str
    type: str
    category: str
    time: float
    project: Optional[str]
    language: Optional[str]
    is_write: bool
    lines: Optional[int]
    lineno: Optional[int]
    cursorpos: Optional[int]


class Heartbeat(NamedTuple):
    """
    Entity represents a file, or g.HIDDEN_ENTITY when file names are hidden
    lineno is 1-indexed, cursorpos is a 0-indexed character offset
    """
    entity: str
    type: EntityType
    category: Category
    time: float
    project: Optional[str]
    language: Optional[str]
    is_write: bool
    lines: Optional[int]
    lineno: Optional[int]
    cursorpos: Optional[int]

    def to_payload(self) -> HeartbeatPayload:
        return {
            'entity': self.entity,
            'type': self.type.value,
            'category': self.category.value,
            'time': self.time,
            'project': self.project,
            'language': self.language,
            'is_write': self.is_write,
            'lines': self.lines,
            'lineno': self.lineno,
            'cursorpos': self.cursorpos,
        }


class WakaTimeConfig(NamedTuple):
    enabled: bool = False
    api_key: Optional[str] = None
    api_url: str = g.API_URL
    timeout: int = g.DEFAULT_TIMEOUT
    # overrides the detected project
    project: Optional[str] = None
    hide_file_names: bool = False
    hide_project_names: bool = False
    proxy: Optional[str] = None


class SettingsType(TypedDict):
    debug: bool


class Document(Protocol):
    """The part of an editor document needed to build a heartbeat"""

    def path(self) -> Optional[str]: ...

    def language_id(self) -> Optional[str]: ...

    def line_count(self) -> int: ...

    def char_to_line(self, pos: int) -> int: ...


class EditorContext(Protocol):
    """What a hook callback receives from the editor"""

    def get_document(self, doc_id: Any) -> Optional[Document]: ...

    def primary_cursor(self, doc: Document) -> int: ...

    def wakatime_config(self) -> Optional[WakaTimeConfig]: ...
