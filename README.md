# aiwire

aiwire provides typed Python models for the JSON that OpenAI-style HTTP APIs send and receive.
It also parses the server-sent event streams returned by streaming chat and response requests.
It depends only on the standard library.

## Install

```
pip install aiwire
```

## What it does not do

aiwire does no networking. It has no HTTP client, no authentication and no retry logic. You send
the JSON it builds with an HTTP client of your choice. You then pass the response text or the
streamed body chunks back to aiwire.

## Models

Every model is a dataclass built on `aiwire.schema.Model`:

- `to_dict()` and `to_json()` produce the wire form. Optional request fields that are unset are
  left out.
- `from_dict()` and `from_json()` read a payload back and check field types. A missing field, a
  wrong type or an unknown enum value raises `ValueError`.

The modules group the models by endpoint:

- `aiwire.chat` and `aiwire.chat_completion`: chat messages, tools, tool choices, reasoning
  options, requests and responses.
- `aiwire.completion` and `aiwire.edit`: legacy text completions and edits.
- `aiwire.embedding`: embeddings.
- `aiwire.image`: image generation, edits and variations.
- `aiwire.audio`: transcription, translation and speech.
- `aiwire.moderation`: moderation.
- `aiwire.files`, `aiwire.batch`, `aiwire.fine_tuning`: files, batches and fine-tuning jobs.
- `aiwire.model`: model listings.
- `aiwire.thread`, `aiwire.message`, `aiwire.run`, `aiwire.types`: assistant threads, messages,
  runs and tools.
- `aiwire.responses`: the responses endpoint. Unknown keys are kept in `extra`.

Model name constants such as `GPT4_O` and `WHISPER_1` are in `aiwire.common`.

```python
from aiwire.chat import ChatCompletionMessage, MessageRole
from aiwire.chat_completion import ChatCompletionRequest

request = ChatCompletionRequest(
    model="gpt-4o",
    messages=[ChatCompletionMessage(role=MessageRole.USER, content="Hello!")],
    temperature=0.2,
)
body = request.to_json()
```

Reasoning options are written in the form the API expects. The keys of the mode sit beside
`exclude` and `enabled`:

```python
from aiwire.chat import EffortMode, Reasoning, ReasoningEffort

request.reasoning = Reasoning(mode=EffortMode(effort=ReasoningEffort.HIGH), exclude=False)
request.to_dict()["reasoning"]   # {"effort": "high", "exclude": False}
```

A tool choice is either a `ToolChoiceMode` or a `ToolChoice` that names one tool. A
`ToolChoiceMode` is sent as a string, for example `"auto"`. A `ToolChoice` is sent as an object.

## Reading responses

```python
from aiwire.chat_completion import ChatCompletionResponse

response = ChatCompletionResponse.from_json(raw_text)
print(response.choices[0].message.content)
```

`FineTuningPagination.from_dict(data, item_type=FineTuningJobObject)` decodes each entry of a
page into the given model.

## Streaming

`ChatCompletionStream` in `aiwire.chat_stream` wraps any async iterable of chunks, given as bytes
or as text. It yields the following items:

- `ContentDelta`, which holds the answer text in `.text`.
- `ToolCallDelta`, which holds parsed `ToolCall` objects in `.tool_calls`.
- `StreamDone`, when the server sends `[DONE]`.

```python
from aiwire.chat_stream import ChatCompletionStream, ContentDelta, StreamDone

async for item in ChatCompletionStream(byte_chunks):
    if isinstance(item, ContentDelta):
        print(item.text, end="")
    elif isinstance(item, StreamDone):
        break
```

`ResponseStream` in `aiwire.responses_stream` does the same for the responses endpoint. It yields
`ResponseStreamEvent` objects, each holding the event name and the data. The data is decoded as
JSON when possible and kept as a string otherwise. It yields `ResponseStreamDone` when the server
sends `[DONE]`.

If the underlying iterable raises an error, both streams log it and end the iteration.

The lower-level pieces are available on their own:

- `aiwire.sse.EventBuffer` splits raw chunks into event blocks.
- `parse_chat_payload` turns the data of one event into a chat stream item.
- `parse_response_event` does the same for the responses endpoint.

## Errors

`aiwire.errors.APIError` is the base class. Its subclasses are:

- `RequestError`, which wraps a transport failure in `.cause`.
- `CustomError`, which carries the message reported by the API in `.message`.