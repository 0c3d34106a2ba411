"""
Sample interview transcripts for demos and tests.
"""
from typing import Any, Dict, List, Tuple

from .schemas import TranscriptMessage

NamedTranscript = Tuple[str, List[TranscriptMessage]]


def _interviewer(text: str) -> Dict[str, Any]:
    return {"speaker": "interviewer", "text": text}


def _interviewee(text: str, **features: float) -> Dict[str, Any]:
    message: Dict[str, Any] = {"speaker": "interviewee", "text": text}
    if features:
        message["emotion_features"] = features
    return message


FEATURE_TRANSCRIPTS: List[Tuple[str, List[Dict[str, Any]]]] = [
    ("High Confidence Interview", [
        _interviewer("Hello, thank you for coming in today. Can you tell me a bit about yourself?"),
        _interviewee(
            "Hi, thank you for having me. I have five years of experience as a full-stack developer, "
            "primarily working with React, Node.js, and TypeScript.",
            confidence=0.85, calmness=0.8, engagement=0.75, interest=0.7,
        ),
        _interviewer(
            "That sounds impressive. Can you walk me through how you would approach building "
            "a real-time chat feature?"
        ),
        _interviewee(
            "Sure. I would start by choosing the right technology stack. For real-time communication, "
            "I would use WebSockets, probably with Socket.io for Node.js.",
            confidence=0.9, calmness=0.85, engagement=0.8, interest=0.75,
        ),
        _interviewer("Great. Do you have any questions for us?"),
        _interviewee(
            "Yes, I am curious about the team structure and what technologies the team is currently using.",
            confidence=0.8, calmness=0.75, engagement=0.85, interest=0.9,
        ),
    ]),
    ("Nervous Interview", [
        _interviewer("Hello, can you tell me about your experience?"),
        _interviewee(
            "Um, well, I have some experience with, uh, programming and stuff.",
            confidence=0.3, calmness=0.4, nervousness=0.7, anxiety=0.6,
        ),
        _interviewer("Can you be more specific?"),
        _interviewee(
            "I mean, I worked with JavaScript and React, but I am not sure if that is what you are looking for.",
            confidence=0.35, calmness=0.35, nervousness=0.75, anxiety=0.65,
        ),
        _interviewer("That is helpful. Can you describe a challenging project you worked on?"),
        _interviewee(
            "Well, there was this one project, but I am not sure if it was that challenging. I guess it was okay.",
            confidence=0.4, calmness=0.45, nervousness=0.65, anxiety=0.6,
        ),
    ]),
    ("Improving Confidence Interview", [
        _interviewer("Tell me about yourself."),
        _interviewee(
            "I am a developer with a few years of experience.",
            confidence=0.5, calmness=0.6, nervousness=0.4,
        ),
        _interviewer("What technologies do you work with?"),
        _interviewee(
            "I work with React, TypeScript, and Node.js primarily.",
            confidence=0.6, calmness=0.65, nervousness=0.3,
        ),
        _interviewer("Can you describe a project you are proud of?"),
        _interviewee(
            "I built a full-stack application that helped improve user engagement by 40%. "
            "It was a great learning experience.",
            confidence=0.75, calmness=0.75, engagement=0.7, interest=0.65,
        ),
    ]),
]

TEXT_TRANSCRIPTS: List[Tuple[str, List[Dict[str, Any]]]] = [
    ("High Confidence Interview", [
        _interviewer("Hello, thank you for coming in today. Can you tell me a bit about yourself?"),
        _interviewee(
            "Hi, thank you for having me. I have five years of experience as a full-stack developer, "
            "primarily working with React, Node.js, and TypeScript. I recently led a team that built a "
            "scalable e-commerce platform that increased sales by 30%."
        ),
        _interviewer(
            "That sounds impressive. Can you walk me through how you would approach building "
            "a real-time chat feature?"
        ),
        _interviewee(
            "Sure. I would start by choosing the right technology stack. For real-time communication, "
            "I would use WebSockets, probably with Socket.io for Node.js. I would design the architecture "
            "to handle message persistence, user presence, and scaling considerations. I would also "
            "implement proper error handling and reconnection logic."
        ),
        _interviewer("Great. Do you have any questions for us?"),
        _interviewee(
            "Yes, I am curious about the team structure and what technologies the team is currently using. "
            "Also, what are the biggest technical challenges the team is facing right now?"
        ),
    ]),
    ("Nervous Interview", [
        _interviewer("Hello, can you tell me about your experience?"),
        _interviewee(
            "Um, well, I have some experience with, uh, programming and stuff. I am not sure if that is "
            "what you are looking for, but I think I might be able to help."
        ),
        _interviewer("Can you be more specific?"),
        _interviewee(
            "I mean, I worked with JavaScript and React, but I am not sure if that is what you are "
            "looking for. Maybe I could learn more if needed?"
        ),
        _interviewer("That is helpful. Can you describe a challenging project you worked on?"),
        _interviewee(
            "Well, there was this one project, but I am not sure if it was that challenging. I guess it "
            "was okay. I think I did a decent job, but maybe it could have been better."
        ),
    ]),
    ("Improving Confidence Interview", [
        _interviewer("Tell me about yourself."),
        _interviewee(
            "I am a developer with a few years of experience. I have worked on some projects, "
            "but I am still learning."
        ),
        _interviewer("What technologies do you work with?"),
        _interviewee(
            "I work with React, TypeScript, and Node.js primarily. I have built several applications "
            "using these technologies."
        ),
        _interviewer("Can you describe a project you are proud of?"),
        _interviewee(
            "I built a full-stack application that helped improve user engagement by 40%. It was a great "
            "learning experience and I successfully implemented real-time features, optimized performance, "
            "and delivered it on time. The project received positive feedback from users."
        ),
    ]),
    ("Engaged and Enthusiastic Interview", [
        _interviewer("What interests you about this role?"),
        _interviewee(
            "I am very excited about this opportunity! I have been following your company for a while and "
            "I am fascinated by the work you do. I am eager to contribute to innovative projects and learn "
            "from the experienced team."
        ),
        _interviewer("What questions do you have for us?"),
        _interviewee(
            "I am curious about the development workflow and how the team collaborates. I would also like "
            "to know more about the technologies you are currently using and what challenges you are solving."
        ),
    ]),
]


def create_sample_transcripts(with_features: bool = True) -> List[NamedTranscript]:
    """
    Build the bundled sample interviews.

    Args:
        with_features: Return the feature-annotated transcripts; otherwise
            the longer text-only transcripts for keyword-based analysis

    Returns:
        List of (name, messages) pairs
    """
    source = FEATURE_TRANSCRIPTS if with_features else TEXT_TRANSCRIPTS
    return [
        (name, [TranscriptMessage.model_validate(message) for message in messages])
        for name, messages in source
    ]
