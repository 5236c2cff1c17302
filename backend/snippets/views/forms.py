"""
Snippets — Create Form
=======================

What:  The create-snippet form and the display state it carries between
       submissions.
How:   The form is bound to a form action (normally
       SnippetService.create_snippet with the request session applied).
       Each submit() passes the current state and the submitted fields to
       the action; a FormState result replaces the local state, a NavigateTo
       result ends the form's life.

The form does no validation of its own; error messages only appear once
the action has answered.
"""

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from snippets.schemas.snippet import CreateSnippetOutcome, FormState, NavigateTo
from snippets.views.rendering import render

logger = logging.getLogger(__name__)

FormAction = Callable[[FormState, Mapping[str, Any]], Awaitable[CreateSnippetOutcome]]


class SnippetCreateForm:
    """
    Title + code form with a threaded display state.

    Usage:
        form = SnippetCreateForm(action=partial(snippet_service.create_snippet, db))
        outcome = await form.submit(fields)
        if isinstance(outcome, NavigateTo):
            ...redirect...
        else:
            html = form.render()
    """

    template_name = "snippets/new.html"

    def __init__(self, action: FormAction, form_state: Optional[FormState] = None):
        self.action = action
        self.form_state = form_state or FormState(message="")

    async def submit(self, fields: Mapping[str, Any]) -> CreateSnippetOutcome:
        outcome = await self.action(self.form_state, fields)
        if isinstance(outcome, NavigateTo):
            return outcome

        logger.debug("Create form rejected: %s", outcome.message)
        self.form_state = outcome
        return self.form_state

    def render(self) -> str:
        return render(self.template_name, form_state=self.form_state)
