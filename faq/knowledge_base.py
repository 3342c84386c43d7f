import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from .matcher import FAQEntry

logger = logging.getLogger(__name__)

FIELDS = ("question", "category", "answer")


class KnowledgeBaseError(ValueError):
    pass


DEFAULT_FAQS: Tuple[FAQEntry, ...] = (
    FAQEntry(
        question="What is the duration of the internship?",
        category="Internship",
        answer="The internship lasts 6 weeks.",
        keywords=("how long", "duration", "length", "weeks"),
    ),
    FAQEntry(
        question="Who is eligible to apply for the internship?",
        category="Eligibility",
        answer="Students currently enrolled in a recognised undergraduate or postgraduate programme can apply.",
        keywords=("eligible", "eligibility", "who can apply"),
    ),
    FAQEntry(
        question="How do I apply?",
        category="Application",
        answer="Fill in the application form on the portal and upload the required documents. "
        "You will receive an OTP on your email to verify the application.",
        keywords=("apply", "application", "register"),
    ),
    FAQEntry(
        question="Which documents do I need to upload?",
        category="Documents",
        answer="Upload your college ID card, a recommendation letter from your institute and a recent photograph.",
        keywords=("documents", "upload", "id card"),
    ),
    FAQEntry(
        question="How do I mark my attendance?",
        category="Attendance",
        answer="Open the Attendance page in your dashboard and mark yourself present once per working day.",
        keywords=("mark attendance", "present"),
    ),
    FAQEntry(
        question="What is the minimum attendance required?",
        category="Attendance",
        answer="You need at least 80% attendance to be eligible for the completion certificate.",
        keywords=("minimum attendance", "attendance percentage"),
    ),
    FAQEntry(
        question="How will I know which project I am assigned to?",
        category="Projects",
        answer="Your assigned project and manager are shown on the Project Details page once an admin assigns you.",
        keywords=("project", "manager", "assigned"),
    ),
    FAQEntry(
        question="When will I receive my offer letter?",
        category="Offer Letter",
        answer="The offer letter is generated after your documents are verified and is sent to your registered email.",
        keywords=("offer letter",),
    ),
    FAQEntry(
        question="How do I get my internship certificate?",
        category="Certificate",
        answer="Certificates are issued after you complete the internship and submit your final project report. "
        "They can be verified online with the certificate ID.",
        keywords=("certificate", "completion"),
    ),
    FAQEntry(
        question="Is there a stipend for the internship?",
        category="Stipend",
        answer="No, the internship is unpaid.",
        keywords=("stipend", "paid", "salary"),
    ),
    FAQEntry(
        question="What are the working hours?",
        category="Timings",
        answer="Working hours are 10:00 AM to 5:30 PM, Monday to Friday.",
        keywords=("working hours", "office hours", "timings"),
    ),
    FAQEntry(
        question="I forgot my password, how do I reset it?",
        category="Account",
        answer="Use the Forgot Password link on the login page to receive a reset link on your registered email.",
        keywords=("password", "login", "reset"),
    ),
    FAQEntry(
        question="How can I contact the internship coordinator?",
        category="Support",
        answer="Write to support@mrsac-isms.in or use the group chat with your project manager.",
        keywords=("contact", "coordinator", "support"),
    ),
)


def _parse_entry(raw: Any, position: int) -> FAQEntry:
    if not isinstance(raw, dict):
        raise KnowledgeBaseError(f"Entry #{position} must be an object, got {type(raw).__name__}")
    values = {}
    for field in FIELDS:
        value = raw.get(field)
        if not isinstance(value, str) or not value.strip():
            raise KnowledgeBaseError(f"Entry #{position} has a missing or empty '{field}'")
        values[field] = value.strip()

    keywords = raw.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(keyword, str) and keyword.strip() for keyword in keywords):
        raise KnowledgeBaseError(f"Entry #{position} has 'keywords' that are not a list of non-empty strings")
    values["keywords"] = tuple(keyword.strip() for keyword in keywords)
    return FAQEntry(**values)


def load_knowledge_base(path: Union[str, Path]) -> Tuple[FAQEntry, ...]:
    """
    Read a JSON array of ``{"question", "category", "answer"}`` objects, each
    with an optional ``"keywords"`` list.

    File order is kept; it decides which entry wins when two score the same.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        raise KnowledgeBaseError(f"Knowledge base file not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise KnowledgeBaseError(f"Knowledge base file {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise KnowledgeBaseError(f"Knowledge base file {path} must contain a JSON array")

    entries = tuple(_parse_entry(raw, position) for position, raw in enumerate(payload))
    logger.info("Loaded %s FAQ entries from %s", len(entries), path)
    return entries


def get_knowledge_base(path: Optional[Union[str, Path]] = None) -> Tuple[FAQEntry, ...]:
    if path is None:
        return DEFAULT_FAQS
    return load_knowledge_base(path)
