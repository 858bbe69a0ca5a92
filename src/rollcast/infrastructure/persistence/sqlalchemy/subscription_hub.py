"""In-process fan-out of collection changes to subscribed listeners."""

import logging
from collections import defaultdict

from rollcast.application.ports import Document, DocumentListener, Unsubscribe

logger = logging.getLogger(__name__)

_Key = tuple[str, str]


class SubscriptionHub:
    """Listeners keyed by (namespace, collection).

    One hub is shared by every store instance of a process so a write made
    through one request reaches listeners registered through another.
    """

    def __init__(self) -> None:
        self._listeners: dict[_Key, list[DocumentListener]] = defaultdict(list)

    def add(
        self,
        namespace: str,
        collection: str,
        listener: DocumentListener,
    ) -> Unsubscribe:
        key = (namespace, collection)
        self._listeners[key].append(listener)

        def _remove() -> None:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                self._listeners.pop(key, None)

        return _remove

    def has_listeners(self, namespace: str, collection: str) -> bool:
        return bool(self._listeners.get((namespace, collection)))

    def publish(
        self,
        namespace: str,
        collection: str,
        documents: list[Document],
    ) -> None:
        """Push ``documents`` to every listener of the collection.

        A failing listener is logged and does not stop the others.
        """
        for listener in list(self._listeners.get((namespace, collection), [])):
            try:
                listener(list(documents))
            except Exception:
                logger.exception(
                    "Listener for %s/%s failed",
                    namespace,
                    collection,
                )
