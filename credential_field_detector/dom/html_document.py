"""
HTML Document - FieldDocument backed by BeautifulSoup.

Attribute values are read the way the browser reflects them on the element:
``type`` falls back to "text", ``form.action`` resolves against the page URL
and ``form.method`` is one of get/post/dialog.
"""

from typing import Dict, List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from credential_field_detector.config.settings import Settings
from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.field import FieldNode
from credential_field_detector.models.form import FormRef


INPUT_TYPES = frozenset({
    'button', 'checkbox', 'color', 'date', 'datetime-local', 'email', 'file',
    'hidden', 'image', 'month', 'number', 'password', 'radio', 'range', 'reset',
    'search', 'submit', 'tel', 'text', 'time', 'url', 'week',
})

FORM_METHODS = frozenset({'get', 'post', 'dialog'})


class HtmlDocument(FieldDocument):
    """Document over parsed markup. The tree is re-walked on every query."""

    def __init__(self, markup: str, url: Optional[str] = None, parser: Optional[str] = None):
        """
        Parse markup into a queryable document.

        Args:
            markup: HTML source
            url: Page URL, used to resolve form actions
            parser: BeautifulSoup parser name (defaults to Settings.HTML_PARSER)
        """
        self.url = url
        self.soup = BeautifulSoup(markup, parser or Settings.HTML_PARSER)

    def query_fields(self) -> List[FieldNode]:
        order = self._document_order()
        return [self._to_field(tag, order) for tag in self.soup.find_all(list(Settings.FIELD_TAGS))]

    def label_text_for(self, field_id: str) -> Optional[str]:
        label = self.soup.find('label', attrs={'for': field_id})
        if label is None:
            return None
        return label.get_text()

    def enclosing_label_text(self, field: FieldNode) -> Optional[str]:
        tag = self._own_tag(field)
        if tag is None:
            return None
        label = tag.find_parent('label')
        return label.get_text() if label is not None else None

    def enclosing_form(self, field: FieldNode) -> Optional[FormRef]:
        tag = self._own_tag(field)
        if tag is None:
            # Node built elsewhere; trust what it carries
            return field.form_ref
        form = tag.find_parent('form')
        if form is None:
            return None
        return self._to_form_ref(form, self._document_order())

    def _own_tag(self, field: FieldNode) -> Optional[Tag]:
        if field is None or field.document is not self or not isinstance(field.handle, Tag):
            return None
        return field.handle

    def _document_order(self) -> Dict[int, int]:
        return {id(tag): index for index, tag in enumerate(self.soup.find_all(True))}

    def _to_field(self, tag: Tag, order: Dict[int, int]) -> FieldNode:
        form = tag.find_parent('form')
        return FieldNode(
            kind=self._field_kind(tag),
            tag_name=tag.name,
            id=_attr(tag, 'id'),
            name=_attr(tag, 'name'),
            placeholder=_attr(tag, 'placeholder'),
            aria_label=_attr(tag, 'aria-label'),
            disabled=tag.has_attr('disabled'),
            document_order_index=order[id(tag)],
            form_ref=self._to_form_ref(form, order) if form is not None else None,
            document=self,
            handle=tag,
        )

    def _to_form_ref(self, form: Tag, order: Dict[int, int]) -> FormRef:
        return FormRef(
            document_order_index=order[id(form)],
            form_id=_attr(form, 'id'),
            action=self._form_action(form),
            method=self._form_method(form),
        )

    def _form_action(self, form: Tag) -> str:
        action = (_attr(form, 'action') or '').strip()
        if not self.url:
            return action
        return urljoin(self.url, action) if action else self.url

    @staticmethod
    def _form_method(form: Tag) -> str:
        method = (_attr(form, 'method') or '').strip().lower()
        return method if method in FORM_METHODS else 'get'

    @staticmethod
    def _field_kind(tag: Tag) -> str:
        if tag.name != 'input':
            return tag.name
        input_type = (_attr(tag, 'type') or '').strip().lower()
        return input_type if input_type in INPUT_TYPES else 'text'


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if isinstance(value, list):
        value = ' '.join(value)
    return value if isinstance(value, str) else None
