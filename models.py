"""
Locale content models
Typed shape of the YAML files under data/<locale>/
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    """Base for content sections: immutable, unknown keys preserved"""

    model_config = ConfigDict(frozen=True, extra='allow')


class Contact(ContentModel):
    email: str = Field(..., description="Public contact e-mail")
    phone: str = Field(default='', description="Phone number in display format")
    linkedin: str = Field(default='', description="LinkedIn profile URL")
    github: str = Field(default='', description="GitHub profile URL")
    website: Optional[str] = Field(None, description="Personal website URL")


class Profile(ContentModel):
    name: str = Field(..., description="Full name")
    title: str = Field(..., description="Job title shown under the name")
    summary: Optional[str] = Field(None, description="Short professional summary")
    location: Optional[str] = Field(None, description="City / country")
    contact: Contact


class Degree(ContentModel):
    course: str = Field(..., description="Course or degree name")
    institution: Optional[str] = Field(None, description="School or university")
    period: Optional[str] = Field(None, description="Display period, e.g. 2016 - 2020")


class Education(ContentModel):
    degrees: List[Degree] = Field(default_factory=list)


class LocaleBundle(ContentModel):
    """All translated content sections for one language"""

    locale: str
    profile: Profile
    skills: Dict[str, Any]
    experience: Dict[str, Any]
    education: Education
    ui: Dict[str, Any]

    def section(self, name: str) -> Dict[str, Any]:
        """JSON-ready dict for a single section"""
        value = getattr(self, name)
        if isinstance(value, BaseModel):
            return value.model_dump(mode='json', exclude_none=True)
        return dict(value)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', exclude_none=True)


SECTION_NAMES = ('profile', 'skills', 'experience', 'education', 'ui')
