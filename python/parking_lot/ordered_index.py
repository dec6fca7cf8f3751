from parking_lot.records import VehicleRecord
from parking_lot.structures import RecordStore

NIL = -1


class OrderedIndex:
    """
    Binary search tree over registration numbers.

    Nodes live in parallel arrays and point at each other by position; NIL marks
    an empty child. Every traversal is iterative, so a degenerate tree built from
    sorted input is slow but never hits the recursion limit.

    Invariant: keys in a left subtree < node key <= keys in the right subtree.
    Equal keys (re-admissions) fall right, which keeps all nodes for one key on
    a single downward path, oldest first.
    """
    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.root = NIL
        self.keys: list[str] = []
        self.handles: list[int] = [] # node -> record handle
        self.left: list[int] = []
        self.right: list[int] = []

    def _new_node(self, key: str, handle: int) -> int:
        self.keys.append(key)
        self.handles.append(handle)
        self.left.append(NIL)
        self.right.append(NIL)
        return len(self.keys) - 1

    def insert(self, handle: int) -> None:
        key = self.store.get(handle).registration_number
        node = self._new_node(key, handle)
        if self.root == NIL:
            self.root = node
            return

        curr = self.root
        while True:
            if key < self.keys[curr]:
                if self.left[curr] == NIL:
                    self.left[curr] = node
                    return
                curr = self.left[curr]
            else:
                if self.right[curr] == NIL:
                    self.right[curr] = node
                    return
                curr = self.right[curr]

    def _matching_nodes(self, key: str) -> list[int]:
        matches = []
        curr = self.root
        while curr != NIL:
            if key < self.keys[curr]:
                curr = self.left[curr]
            else:
                if key == self.keys[curr]:
                    matches.append(curr)
                curr = self.right[curr]
        return matches

    def find_exact(self, registration_number: str) -> VehicleRecord | None:
        # latest archived record wins when a vehicle was parked more than once
        matches = self._matching_nodes(registration_number)
        if not matches:
            return None
        return self.store.get(self.handles[matches[-1]])

    def find_history(self, registration_number: str) -> list[VehicleRecord]:
        return [
            self.store.get(self.handles[node])
            for node in self._matching_nodes(registration_number)
        ]

    def find_all(self, make: str = "", model: str = "") -> list[VehicleRecord]:
        """Pre-order scan; an empty filter field matches any value."""
        results = []
        if self.root == NIL:
            return results

        stack = [self.root]
        while stack:
            node = stack.pop()
            record = self.store.get(self.handles[node])
            if (
                (not make or record.make == make) and
                (not model or record.model == model)
            ):
                results.append(record)

            # right first so the left subtree is visited first
            if self.right[node] != NIL:
                stack.append(self.right[node])
            if self.left[node] != NIL:
                stack.append(self.left[node])
        return results

    def find_prefix(self, prefix: str) -> list[VehicleRecord]:
        """In-order scan restricted to subtrees that can hold keys starting with prefix."""
        results = []
        stack: list[int] = []
        curr = self.root
        while stack or curr != NIL:
            while curr != NIL:
                stack.append(curr)
                # left keys are smaller than this one, useless once it sorts below the prefix
                curr = self.left[curr] if prefix <= self.keys[curr] else NIL

            node = stack.pop()
            key = self.keys[node]
            in_range = key.startswith(prefix)
            if in_range:
                results.append(self.store.get(self.handles[node]))
            curr = self.right[node] if key < prefix or in_range else NIL
        return results

    def height(self) -> int:
        if self.root == NIL:
            return 0

        best = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (self.left[node], self.right[node]):
                if child != NIL:
                    stack.append((child, depth + 1))
        return best

    def __len__(self) -> int:
        return len(self.keys)
