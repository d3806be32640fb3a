"""Comment tree construction.

Turns a flat batch of comments (one page of roots plus every reply under
them) into display trees with bounded depth. The batch is kept as an
arena of records keyed by id with a separate parent -> children index;
nodes never hold references back to their parents.

Depth rules, with roots at depth 0:
- Nodes above ``max_depth - 2`` get their direct replies one level down.
- A node at ``max_depth - 2`` gets its whole reply subtree flattened into
  a single sibling group at ``max_depth - 1``, oldest first. Nothing is
  dropped, and flattened comments keep their original ``parent_id``.
"""

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Sequence

import logfire

from tracker.domain.model import Comment, User
from tracker.domain.value import Badge, CommentId, UserId, VoteAggregate, VoteState

DEFAULT_MAX_DEPTH = 4


@dataclass
class CommentNode:
    """A comment annotated for display."""

    comment: Comment
    depth: int
    upvote_count: int = 0
    downvote_count: int = 0
    viewer_vote: VoteState = VoteState.NONE
    is_author: bool = False
    badge: Badge = Badge.MEMBER
    author_name: str | None = None
    can_reply: bool = True
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def score(self) -> int:
        return self.upvote_count - self.downvote_count


@dataclass
class CommentPage:
    """One page of root comment trees plus pagination totals."""

    nodes: list[CommentNode]
    page: int
    page_size: int
    total_roots: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_roots / self.page_size) if self.page_size else 0


def _sibling_key(comment: Comment) -> tuple:
    # Oldest first; id breaks ties between identical timestamps
    return (comment.created_at, str(comment.id))


def build_comment_tree(
    roots: Sequence[Comment],
    replies: Iterable[Comment],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    aggregates: Mapping[CommentId, VoteAggregate] | None = None,
    uploader_id: UserId | None = None,
    authors: Mapping[UserId, User] | None = None,
    allow_overflow_replies: bool = True,
) -> list[CommentNode]:
    """Build display trees for a page of roots.

    Args:
        roots: Root comments in the order they should be rendered
        replies: Every reply whose root ancestor is among ``roots``
        max_depth: Number of display levels (roots included); at least 2
        aggregates: Vote aggregates by comment id (missing ids get zeros)
        uploader_id: Torrent uploader, used to flag OP comments
        authors: Comment authors by id, used for badges and names
        allow_overflow_replies: Whether nodes on the deepest level accept
            replies (true when over-depth replies are flattened)

    Returns:
        One CommentNode per root, in the given order

    Raises:
        ValueError: If max_depth is lower than 2
    """
    if max_depth < 2:
        raise ValueError("max_depth must be at least 2")

    aggregates = aggregates or {}
    authors = authors or {}
    leaf_depth = max_depth - 1

    # Arena + parent index
    arena: dict[CommentId, Comment] = {root.id: root for root in roots}
    children_index: dict[CommentId, list[CommentId]] = defaultdict(list)
    for reply in replies:
        if reply.is_root or reply.id in arena:
            continue
        arena[reply.id] = reply
        children_index[reply.parent_id].append(reply.id)

    for child_ids in children_index.values():
        child_ids.sort(key=lambda cid: _sibling_key(arena[cid]))

    placed: set[CommentId] = set()

    def make_node(comment: Comment, depth: int) -> CommentNode:
        placed.add(comment.id)
        aggregate = aggregates.get(comment.id) or VoteAggregate()
        author = authors.get(comment.author_id)
        return CommentNode(
            comment=comment,
            depth=depth,
            upvote_count=aggregate.upvote_count,
            downvote_count=aggregate.downvote_count,
            viewer_vote=aggregate.viewer_vote,
            is_author=uploader_id is not None and comment.author_id == uploader_id,
            badge=Badge.for_role(author.role if author else None),
            author_name=author.username if author else None,
            can_reply=depth < leaf_depth or allow_overflow_replies,
        )

    def descendants(comment_id: CommentId) -> list[Comment]:
        found: list[Comment] = []
        stack = list(children_index.get(comment_id, ()))
        while stack:
            child_id = stack.pop()
            if child_id in placed:
                continue
            placed.add(child_id)
            found.append(arena[child_id])
            stack.extend(children_index.get(child_id, ()))
        found.sort(key=_sibling_key)
        return found

    def attach(node: CommentNode) -> None:
        if node.depth >= leaf_depth:
            return
        if node.depth == leaf_depth - 1:
            node.children = [make_node(c, leaf_depth) for c in descendants(node.id)]
            return
        for child_id in children_index.get(node.id, ()):
            if child_id in placed:
                continue
            child = make_node(arena[child_id], node.depth + 1)
            attach(child)
            node.children.append(child)

    trees: list[CommentNode] = []
    for root in roots:
        if root.id in placed:
            continue
        node = make_node(root, 0)
        attach(node)
        trees.append(node)

    orphaned = len(arena) - len(placed)
    if orphaned:
        logfire.warn(
            "Replies without a reachable root were skipped",
            orphaned=orphaned,
            root_count=len(trees),
        )

    return trees


def iter_nodes(nodes: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node in pre-order."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def count_nodes(nodes: Iterable[CommentNode]) -> int:
    """Count every node across a forest."""
    return sum(1 for _ in iter_nodes(nodes))


def flatten_comment_tree(nodes: Iterable[CommentNode]) -> list[Comment]:
    """Flatten display trees back into stored comment records (pre-order).

    The ``parent_id`` of each returned comment is its stored parent, not
    its display parent, so flattened deep replies keep their real edges.
    """
    return [node.comment for node in iter_nodes(nodes)]
