#!/usr/bin/env python3
"""
Typhoon AI Integration - Summarize assignments and read attachments.

Talks to the OpenAI-compatible Typhoon chat-completions endpoint. Both
operations return text even on failure: errors come back as a message
starting with the failure marker, so a single bad call never aborts the
menu loop.
"""

import logging
from typing import Optional, Dict, Any

import requests

from config import DEFAULT_TYPHOON_URL, DEFAULT_TYPHOON_MODEL

logger = logging.getLogger(__name__)

FAILURE_MARKER = "❌"
TEXT_FAILURE_PREFIX = f"{FAILURE_MARKER} AI ไม่สามารถสรุปได้: "
FILE_FAILURE_PREFIX = f"{FAILURE_MARKER} ไม่สามารถอ่านไฟล์ได้: "

SUMMARY_SYSTEM_PROMPT = """คุณคือผู้ช่วยนักเรียนที่เก่งมาก ช่วยสรุปงานการบ้านให้ครบถ้วนและชัดเจน โดยตอบในรูปแบบนี้:

📌 **ประเภทงาน**: (เช่น รายงาน, แบบฝึกหัด, โปรเจค, นำเสนอ)
📝 **สิ่งที่ต้องทำ**: (ลิสต์ขั้นตอนชัดเจน)
⏰ **เวลาที่ควรใช้**: (ประมาณการ)
💡 **เคล็ดลับ**: (คำแนะนำสั้นๆ เพื่อทำงานให้ดี)

ตอบเป็นภาษาไทย กระชับ อ่านง่าย"""

VISION_SYSTEM_PROMPT = "คุณคือผู้ช่วยอ่านเอกสาร อ่านและสรุปเนื้อหาจากไฟล์ที่ได้รับให้เข้าใจง่าย ตอบเป็นภาษาไทย"

SUMMARY_TEMPERATURE = 0.3
SUMMARY_MAX_TOKENS = 1000
VISION_MAX_TOKENS = 2000

# Errors that are reported inline instead of raised
CALL_ERRORS = (requests.RequestException, ValueError, KeyError, IndexError, TypeError)


def extract_content(body: Dict[str, Any]) -> str:
    """Pull choices[0].message.content out of a chat-completions response."""
    content = body["choices"][0]["message"]["content"]
    if not isinstance(content, str):
        raise ValueError("Malformed response: message content is not text")
    return content


def describe_error(error: Exception) -> str:
    """Prefer the API's own error.message over the exception text."""
    response = getattr(error, "response", None)
    if response is not None:
        try:
            message = response.json()["error"]["message"]
            if message:
                return str(message)
        except (ValueError, KeyError, TypeError):
            pass
    return str(error)


class TyphoonClient:
    """
    Typhoon chat-completions client.

    Usage:
        typhoon = TyphoonClient(api_key="...")
        print(typhoon.summarize_text("หัวข้อ: รายงานบทที่ 1"))
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = DEFAULT_TYPHOON_URL,
        model: str = DEFAULT_TYPHOON_MODEL,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Typhoon client.

        Args:
            api_key: Typhoon API key (bearer token)
            api_url: Chat-completions endpoint
            model: Model identifier
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.api_key = api_key or ""
        self.api_url = api_url
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "TyphoonClient":
        return cls(
            api_key=config.api_key,
            api_url=config.api_url,
            model=config.model,
            timeout=config.timeout,
        )

    def _chat(self, payload: Dict[str, Any]) -> str:
        if not self.api_key:
            raise ValueError("TYPHOON_API_KEY is not set")

        logger.debug(f"POST {self.api_url} model={payload['model']} max_tokens={payload['max_tokens']}")
        response = requests.post(
            self.api_url,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return extract_content(response.json())

    def summarize_text(self, text: str) -> str:
        """
        Summarize assignment text into the four-section study format.

        Args:
            text: Assignment title, description and due date

        Returns:
            Summary, or an error message starting with the failure marker
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "temperature": SUMMARY_TEMPERATURE,
            "max_tokens": SUMMARY_MAX_TOKENS,
        }
        try:
            return self._chat(payload)
        except CALL_ERRORS as e:
            logger.warning(f"Typhoon summary failed: {e}")
            return TEXT_FAILURE_PREFIX + describe_error(e)

    def summarize_file(self, data: str, mime_type: str, file_name: str) -> str:
        """
        Read an image or PDF with the vision model.

        Args:
            data: Base64-encoded file content
            mime_type: MIME type for the data URL
            file_name: Shown to the model for context

        Returns:
            Content summary, or an error message starting with the failure marker
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": VISION_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": f"อ่านและสรุปเนื้อหาจากไฟล์นี้: {file_name}"},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{mime_type};base64,{data}"},
                        },
                    ],
                },
            ],
            "max_tokens": VISION_MAX_TOKENS,
        }
        try:
            return self._chat(payload)
        except CALL_ERRORS as e:
            logger.warning(f"Typhoon vision read of {file_name} failed: {e}")
            return FILE_FAILURE_PREFIX + describe_error(e)
