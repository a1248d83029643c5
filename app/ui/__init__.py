"""UI Components for the RSVP Trainer"""

from app.ui.flashcard import render_word_card
from app.ui.session_stats import render_session_stats
from app.ui.rsvp_display import render_rsvp_display
from app.ui.recall_form import render_recall_form
from app.ui.result_panel import render_result_panel
from app.ui.setup_form import render_setup_form
from app.ui.studied_list import render_studied_list

__all__ = [
    "render_word_card",
    "render_session_stats",
    "render_rsvp_display",
    "render_recall_form",
    "render_result_panel",
    "render_setup_form",
    "render_studied_list",
]
