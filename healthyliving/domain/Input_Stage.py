"""Input stage: the two text drafts typed by the user before submitting."""
from healthyliving.utilities.constants import REQUIRED_URL_PREFIX


class InputStage:
    def __init__(self):
        self.name_draft = ""
        self.url_draft = ""

    def set_name_draft(self, value: str):
        self.name_draft = value

    def set_url_draft(self, value: str):
        self.url_draft = value

    def can_submit(self) -> bool:
        '''True when the name is not blank and the trimmed URL starts with https://.'''
        return bool(self.name_draft.strip()) and self.url_draft.strip().startswith(REQUIRED_URL_PREFIX)

    def reset_after_submit(self):
        self.name_draft = ""
        self.url_draft = ""
