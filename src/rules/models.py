from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class LinksRules(BaseModel):
    url_pattern: str = r"^https?://.+\..+"
    title_max_length: int = 100
    predefined_icons: dict[str, list[str]]

    def icon_names(self) -> frozenset[str]:
        return frozenset(name for names in self.predefined_icons.values() for name in names)

class RegexRule(BaseModel):
    min: int
    max: int
    pattern: str

class OwnersRules(BaseModel):
    slug: RegexRule
    bio_max_length: int = 150

class AnalyticsRules(BaseModel):
    recent_events_limit: int = Field(default=100, gt=0)

class NotepadRules(BaseModel):
    content_max_length: int = Field(default=5000, gt=0)

class OpsRules(BaseModel):
    data_dir_required: bool
    required_env: list[str]

class Rules(BaseModel):
    project: ProjectRules
    links: LinksRules
    owners: OwnersRules
    analytics: AnalyticsRules
    notepad: NotepadRules = Field(default_factory=NotepadRules)
    ops: OpsRules
