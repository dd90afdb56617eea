"""Admin-side glue: the publish-box checkbox and its save handler.

Nonce creation and verification belong to the host framework; the handler
receives a verifier callable and only mutates the store once it accepts the
submitted token.
"""
from __future__ import annotations

import html
import logging
from typing import Callable, Mapping

from .store import HiddenPostsStore

logger = logging.getLogger(__name__)

FIELD_NAME = "hidden-posts"
NONCE_KEY = "hidden-posts-nonce"
DEFAULT_CHECKBOX_TEXT = "Hide Post"

# verify_nonce(token, action) -> bool
NonceVerifier = Callable[[str, str], bool]
CheckboxTextHook = Callable[[str], str]


def set_hidden(store: HiddenPostsStore, post_id: int, hidden: bool) -> None:
    """Hide or unhide *post_id*."""
    if hidden:
        store.add(post_id)
    else:
        store.remove(post_id)


def save_post(
    store: HiddenPostsStore,
    post_id: int,
    form: Mapping[str, str],
    verify_nonce: NonceVerifier,
) -> bool:
    """Apply a submitted publish-box form.

    Returns False without touching the store when the nonce is missing or
    rejected.  Otherwise the presence of the checkbox field decides whether
    the post is hidden, and True is returned.
    """
    token = form.get(NONCE_KEY)
    if token is None or not verify_nonce(token, NONCE_KEY):
        logger.warning("Rejected hidden posts update for post %s: invalid nonce", post_id)
        return False

    set_hidden(store, post_id, FIELD_NAME in form)
    return True


def render_checkbox(
    store: HiddenPostsStore,
    post_id: int,
    nonce_field: str = "",
    checkbox_text: CheckboxTextHook | None = None,
) -> str:
    """Render the publish-box checkbox, checked when *post_id* is hidden.

    *nonce_field* is the host-generated hidden input carrying the token; it
    is emitted verbatim in front of the checkbox.
    """
    text = DEFAULT_CHECKBOX_TEXT
    if checkbox_text is not None:
        text = checkbox_text(text)
    checked = " checked='checked'" if store.contains(post_id) else ""
    return (
        f'{nonce_field}<div id="hidden-posts-box" class="misc-pub-section">'
        f'<label><input type="checkbox" name="{FIELD_NAME}"{checked}> '
        f"{html.escape(text)}</label></div>"
    )
