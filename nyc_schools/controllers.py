"""List and detail controllers.

Each controller is a small state machine that drives the data service and
exposes what the presentation layer renders: display items, an is_loading
flag, and change notifications. Completions arrive on executor threads and
are handed to ``dispatch`` so state is only written on the thread that owns
the presentation layer.
"""

import enum
import logging
import weakref
from collections.abc import Callable
from concurrent.futures import Future

from nyc_schools.rows import DisplayRow, SchoolItem, build_rows
from nyc_schools.schema import SatScoreRecord, SchoolRecord
from nyc_schools.service import DataService
from nyc_schools.utils import get_first_or_none

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]


class State(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    READY = "ready"
    FAILED = "failed"


def call_now(fn: Callable[[], None]) -> None:
    fn()


def _on_done(ref: weakref.ref, handler_name: str, future: Future) -> None:
    """Route a completed future to a controller if it is still alive."""
    controller = ref()
    if controller is None or controller.closed:
        logger.debug("Dropping completion for dismissed controller")
        return

    def deliver():
        if controller.closed:
            logger.debug("Dropping completion for dismissed controller")
            return
        getattr(controller, handler_name)(future)

    controller.dispatch(deliver)


class _Controller:
    """Base for the screen controllers.

    dispatch defaults to running completions immediately, which with a real
    DataService means on an executor thread. A UI that owns a main thread
    must pass a dispatch that queues onto it (see cli.MainLoop).
    """

    def __init__(self, service: DataService, dispatch: Dispatch = call_now):
        self.service = service
        self.dispatch = dispatch
        self.state = State.IDLE
        self.error: BaseException | None = None
        self.closed = False
        self._listeners: list[Callable] = []

    @property
    def is_loading(self) -> bool:
        return self.state is State.LOADING

    def subscribe(self, callback: Callable) -> Callable[[], None]:
        """Call callback(controller) after every state change."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Detach from the presentation layer; late completions are ignored."""
        self.closed = True
        self._listeners.clear()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self)

    def _watch(self, future: Future, handler_name: str) -> None:
        future.add_done_callback(
            lambda f, ref=weakref.ref(self): _on_done(ref, handler_name, f)
        )


class ListController(_Controller):
    """Loads all schools and hands the selected one to a detail controller."""

    def __init__(
        self,
        service: DataService,
        dispatch: Dispatch = call_now,
        navigate: Callable[["DetailController"], None] | None = None,
    ):
        super().__init__(service, dispatch)
        self.navigate = navigate
        self.schools: list[SchoolRecord] = []
        self.selected_school: SchoolRecord | None = None

    @property
    def items(self) -> list[SchoolItem]:
        return [SchoolItem.from_school(school) for school in self.schools]

    def activate(self) -> None:
        self.state = State.LOADING
        self.error = None
        self._notify()
        self._watch(self.service.list_schools(), "_schools_loaded")

    def _schools_loaded(self, future: Future) -> None:
        try:
            self.schools = list(future.result())
        except Exception as e:
            logger.error("Failed to load schools: %s", e)
            self.error = e
            self.state = State.FAILED
        else:
            self.state = State.LOADED
        self._notify()

    def select(self, index: int) -> "DetailController":
        if not 0 <= index < len(self.schools):
            raise IndexError(f"No school at row {index} ({len(self.schools)} loaded)")
        school = self.schools[index]
        self.selected_school = school
        detail = DetailController(school, self.service, self.dispatch)
        if self.navigate is not None:
            self.navigate(detail)
        return detail


class DetailController(_Controller):
    """Shows one school and lazily loads its SAT scores."""

    def __init__(self, school: SchoolRecord, service: DataService, dispatch: Dispatch = call_now):
        super().__init__(service, dispatch)
        self.school = school
        self._score: SatScoreRecord | None = None
        self.rows: list[DisplayRow] = build_rows(school)

    @property
    def score(self) -> SatScoreRecord | None:
        return self._score

    @score.setter
    def score(self, value: SatScoreRecord | None) -> None:
        self._score = value
        self.rows = build_rows(self.school, value)

    def activate(self) -> None:
        self.rows = build_rows(self.school, self._score)
        if not self.school.dbn:
            logger.debug("School %r has no dbn, skipping SAT scores", self.school.school_name)
            self.state = State.READY
            self._notify()
            return

        self.state = State.LOADING
        self.error = None
        self._notify()
        self._watch(self.service.list_sat_scores(self.school.dbn), "_scores_loaded")

    def _scores_loaded(self, future: Future) -> None:
        try:
            self.score = get_first_or_none(future.result())
        except Exception as e:
            self.score = None
            logger.warning("Failed to load SAT scores for %s: %s", self.school.dbn, e)
            self.error = e
            self.state = State.FAILED
        else:
            self.state = State.READY
        self._notify()
