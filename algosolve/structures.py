"""Small container types: a min-stack, a stack over a queue, a queue over
stacks, and a minimal social feed."""

from __future__ import annotations

from collections import defaultdict, deque
from itertools import islice

FEED_SIZE = 10


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current))

    def pop(self) -> None:
        """Remove the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top from empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


class QueueStack:
    """A LIFO stack kept in a single FIFO queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Push ``x``, rotating the queue so it sits at the front."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element."""
        if not self._queue:
            raise IndexError("top from empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._queue


class StackQueue:
    """A FIFO queue kept in two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._inbox.append(x)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def pop(self) -> int:
        """Remove and return the front element."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front element."""
        self._refill()
        return self._outbox[-1]

    def empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._inbox and not self._outbox


class Twitter:
    """Users post tweets, follow each other and read a recent-news feed."""

    def __init__(self) -> None:
        self._tweets: list[tuple[int, int]] = []
        self._followed: defaultdict[int, set[int]] = defaultdict(set)

    def post_tweet(self, user_id: int, tweet_id: int) -> None:
        """Record that ``user_id`` posted ``tweet_id``."""
        self._tweets.append((user_id, tweet_id))

    def get_news_feed(self, user_id: int) -> list[int]:
        """Return up to ten most recent tweet ids from the user and whom
        they follow, newest first."""
        authors = self._followed[user_id]
        authors.add(user_id)
        feed = (tweet for author, tweet in reversed(self._tweets) if author in authors)
        return list(islice(feed, FEED_SIZE))

    def follow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` follow ``followee_id``."""
        self._followed[follower_id].add(followee_id)

    def unfollow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` stop following ``followee_id``."""
        self._followed[follower_id].discard(followee_id)