import logging
from typing import Callable, Optional

from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.errors import HeapError
from src.dary_heap.loader import load_nodes

logger = logging.getLogger(__name__)

LOAD = "Load list"
BUILD = "Build heap"
PRINT = "Print heap"
EXTRACT = "Extract max"
INSERT = "Insert"
INCREASE = "Increase key"
REMOVE = "Remove"
QUIT = "Quit"

# Only offered once the heap holds at least one node
HEAP_ACTIONS = [BUILD, PRINT, EXTRACT, INSERT, INCREASE, REMOVE]


class HeapMenu:
    """
    Interactive controller around a :class:`DaryHeap`.

    Reads actions, keys and indices through ``input_func`` and reports
    results and failures through ``output_func``. Heap errors never end the
    loop; only ``Quit`` or end of input do.

    Parameters
    ----------
    heap : DaryHeap
        The heap to start with. ``Load list`` replaces it.
    input_func : Callable[[str], str]
        Prompt reader, by default :func:`input`.
    output_func : Callable[[str], None]
        Line printer, by default :func:`print`.
    """

    def __init__(
        self,
        heap: DaryHeap,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.heap = heap
        self._input = input_func or input
        self._output = output_func or print
        self._handlers = {
            LOAD: self.load,
            BUILD: self.build,
            PRINT: self.show,
            EXTRACT: self.extract,
            INSERT: self.insert,
            INCREASE: self.increase,
            REMOVE: self.remove,
        }

    def options(self) -> list[str]:
        selections = [LOAD]
        if not self.heap.is_empty():
            selections.extend(HEAP_ACTIONS)
        selections.append(QUIT)
        return selections

    def run(self) -> int:
        """Loop until the user quits; returns the process exit status."""
        while True:
            try:
                action = self.choose()
                if action == QUIT:
                    break
                self.dispatch(action)
            except EOFError:
                break
        logger.debug("Leaving the menu")
        return 0

    def choose(self) -> str:
        selections = self.options()
        while True:
            for number, name in enumerate(selections, 1):
                self._output(f"{number}) {name}")
            answer = self._input("Choose an action: ").strip()

            if answer.isdigit() and 1 <= int(answer) <= len(selections):
                return selections[int(answer) - 1]
            for name in selections:
                if answer.lower() == name.lower():
                    return name
            self._output(f"Invalid selection: {answer!r}")

    def dispatch(self, action: str) -> None:
        logger.debug("Running %r on %r", action, self.heap)
        try:
            self._handlers[action]()
        except (HeapError, OverflowError) as e:
            logger.info("%s failed: %s", action, e)
            self._output(f"Error: {e}")

    def load(self) -> None:
        path = self._input("Enter the list's filepath: ").strip()
        nodes = load_nodes(path)
        self.heap = DaryHeap(nodes, self.heap.branching_factor)
        self._output(f"Loaded {len(self.heap)} node(s).")

    def build(self) -> None:
        self.heap.build_max_heap()
        self.show()

    def show(self) -> None:
        self._output(f"Heap: {self.heap}")

    def extract(self) -> None:
        self._output(f"Extracted max: {self.heap.extract_max()}")

    def insert(self) -> None:
        key = self._prompt_int("Key to insert: ")
        self.heap.insert(key)
        self._output(f"Inserted {key}.")

    def increase(self) -> None:
        index = self._prompt_int("Index of the node: ")
        key = self._prompt_int("New key: ")
        self.heap.increase_key(index, key)
        self._output(f"Increased the key at index {index} to {key}.")

    def remove(self) -> None:
        index = self._prompt_int("Index of the node to remove: ")
        removed = self.heap.delete(index)
        self._output(f"Removed {removed} from index {index}.")

    def _prompt_int(self, prompt: str) -> int:
        while True:
            answer = self._input(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self._output(f"Not an integer: {answer!r}")
