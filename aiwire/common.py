"""Shared response shapes and model name constants."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.schema import Model


@dataclass
class Usage(Model):
    """Token accounting returned with completions."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass
class DeletionStatus(Model):
    """Result of deleting an object."""

    id: str
    object: str
    deleted: bool


@dataclass
class EmptyRequestBody(Model):
    """A request body with no fields."""


# O-series models
O1 = "o1"
O1_2024_12_17 = "o1-2024-12-17"
O1_MINI = "o1-mini"
O1_MINI_2024_09_12 = "o1-mini-2024-09-12"
O1_PREVIEW = "o1-preview"
O1_PREVIEW_2024_09_12 = "o1-preview-2024-09-12"
O1_PRO = "o1-pro"
O1_PRO_2025_03_19 = "o1-pro-2025-03-19"

O3 = "o3"
O3_2025_04_16 = "o3-2025-04-16"
O3_MINI = "o3-mini"
O3_MINI_2025_01_31 = "o3-mini-2025-01-31"

O4_MINI = "o4-mini"
O4_MINI_2025_04_16 = "o4-mini-2025-04-16"
O4_MINI_DEEP_RESEARCH = "o4-mini-deep-research"
O4_MINI_DEEP_RESEARCH_2025_06_26 = "o4-mini-deep-research-2025-06-26"

# GPT-5 models
GPT5 = "gpt-5"
GPT5_2025_08_07 = "gpt-5-2025-08-07"
GPT5_CHAT_LATEST = "gpt-5-chat-latest"
GPT5_CODEX = "gpt-5-codex"
GPT5_MINI = "gpt-5-mini"
GPT5_MINI_2025_08_07 = "gpt-5-mini-2025-08-07"
GPT5_NANO = "gpt-5-nano"
GPT5_NANO_2025_08_07 = "gpt-5-nano-2025-08-07"

# GPT-4.1 models
GPT4_1 = "gpt-4.1"
GPT4_1_2025_04_14 = "gpt-4.1-2025-04-14"
GPT4_1_MINI = "gpt-4.1-mini"
GPT4_1_MINI_2025_04_14 = "gpt-4.1-mini-2025-04-14"
GPT4_1_NANO = "gpt-4.1-nano"
GPT4_1_NANO_2025_04_14 = "gpt-4.1-nano-2025-04-14"

# GPT-4o models
GPT4_O = "gpt-4o"
GPT4_O_2024_05_13 = "gpt-4o-2024-05-13"
GPT4_O_2024_08_06 = "gpt-4o-2024-08-06"
GPT4_O_2024_11_20 = "gpt-4o-2024-11-20"
GPT4_O_LATEST = "chatgpt-4o-latest"

GPT4_O_MINI = "gpt-4o-mini"
GPT4_O_MINI_2024_07_18 = "gpt-4o-mini-2024-07-18"

# GPT-4o search models
GPT4_O_SEARCH_PREVIEW = "gpt-4o-search-preview"
GPT4_O_SEARCH_PREVIEW_2025_03_11 = "gpt-4o-search-preview-2025-03-11"
GPT4_O_MINI_SEARCH_PREVIEW = "gpt-4o-mini-search-preview"
GPT4_O_MINI_SEARCH_PREVIEW_2025_03_11 = "gpt-4o-mini-search-preview-2025-03-11"

# GPT-4o realtime models
GPT4_O_REALTIME_PREVIEW = "gpt-4o-realtime-preview"
GPT4_O_REALTIME_PREVIEW_2024_10_01 = "gpt-4o-realtime-preview-2024-10-01"
GPT4_O_REALTIME_PREVIEW_2024_12_17 = "gpt-4o-realtime-preview-2024-12-17"
GPT4_O_REALTIME_PREVIEW_2025_06_03 = "gpt-4o-realtime-preview-2025-06-03"
GPT4_O_MINI_REALTIME_PREVIEW = "gpt-4o-mini-realtime-preview"
GPT4_O_MINI_REALTIME_PREVIEW_2024_12_17 = "gpt-4o-mini-realtime-preview-2024-12-17"

# GPT-4o audio models
GPT4_O_AUDIO_PREVIEW = "gpt-4o-audio-preview"
GPT4_O_AUDIO_PREVIEW_2024_10_01 = "gpt-4o-audio-preview-2024-10-01"
GPT4_O_AUDIO_PREVIEW_2024_12_17 = "gpt-4o-audio-preview-2024-12-17"
GPT4_O_AUDIO_PREVIEW_2025_06_03 = "gpt-4o-audio-preview-2025-06-03"
GPT4_O_MINI_AUDIO_PREVIEW = "gpt-4o-mini-audio-preview"
GPT4_O_MINI_AUDIO_PREVIEW_2024_12_17 = "gpt-4o-mini-audio-preview-2024-12-17"

# GPT-4o transcription models
GPT4_O_TRANSCRIBE = "gpt-4o-transcribe"
GPT4_O_MINI_TRANSCRIBE = "gpt-4o-mini-transcribe"

# GPT-4 and GPT-4 Turbo models
GPT4 = "gpt-4"
GPT4_0613 = "gpt-4-0613"
GPT4_32K = "gpt-4-32k"
GPT4_32K_0613 = "gpt-4-32k-0613"
GPT4_0314 = "gpt-4-0314"
GPT4_32K_0314 = "gpt-4-32k-0314"

GPT4_TURBO = "gpt-4-turbo"
GPT4_TURBO_2024_04_09 = "gpt-4-turbo-2024-04-09"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_0125_PREVIEW = "gpt-4-0125-preview"
GPT4_1106_PREVIEW = "gpt-4-1106-preview"
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"

# GPT-3.5 Turbo models
GPT3_5_TURBO = "gpt-3.5-turbo"
GPT3_5_TURBO_0125 = "gpt-3.5-turbo-0125"
GPT3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
GPT3_5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3_5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3_5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"

GPT3_5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
GPT3_5_TURBO_INSTRUCT_0914 = "gpt-3.5-turbo-instruct-0914"

# Audio models
GPT_AUDIO = "gpt-audio"
GPT_AUDIO_2025_08_28 = "gpt-audio-2025-08-28"
GPT_REALTIME = "gpt-realtime"
GPT_REALTIME_2025_08_28 = "gpt-realtime-2025-08-28"

# Text-to-speech models
TTS_1 = "tts-1"
TTS_1_HD = "tts-1-hd"
TTS_1_1106 = "tts-1-1106"
TTS_1_HD_1106 = "tts-1-hd-1106"
GPT4_O_MINI_TTS = "gpt-4o-mini-tts"

# Speech-to-text models
WHISPER_1 = "whisper-1"

# Image generation models
DALL_E_2 = "dall-e-2"
DALL_E_3 = "dall-e-3"
GPT_IMAGE_1 = "gpt-image-1"

# Embedding models
TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

# Moderation models
OMNI_MODERATION_LATEST = "omni-moderation-latest"
OMNI_MODERATION_2024_09_26 = "omni-moderation-2024-09-26"

# Legacy models
DAVINCI_002 = "davinci-002"
BABBAGE_002 = "babbage-002"

# Code models
CODEX_MINI_LATEST = "codex-mini-latest"

# Preview models (GPT-4.5)
GPT4_5_PREVIEW = "gpt-4.5-preview"
GPT4_5_PREVIEW_2025_02_27 = "gpt-4.5-preview-2025-02-27"