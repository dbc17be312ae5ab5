# toka

toka is a small toolkit for conversational agents that talk to
OpenAI-style chat completion endpoints. An agent keeps its whole conversation
history and sends it with every request. Each agent works in one of three
modes:

- **chat**: ordinary conversation;
- **coder**: the system message asks for plain source code only. A message
  that starts with `!build:<filename>` has its reply written to
  `output/<filename>`; a message that starts with `!build` alone asks for the
  filename on standard input (an empty answer just returns the reply);
- **twitter**: the message is posted as a tweet through the X v2 API, signed
  with OAuth 1.0a, using the agent's `twitter_credentials`.

Agents can be exported to a file and imported again.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
toka
```

This prints a logo and starts an interactive shell that holds one agent,
`Alpha`, a `GPT4FreeAgent` that talks to a local gpt4free server at
`http://localhost:1337/v1/chat/completions`. After every command the shell
lists the agents (index, mode, name) and shows the commands:

```
chat <agent nr>               - Chat with the specified agent
convert to coder <agent nr>   - Convert an agent to coder mode
convert to twitter <agent nr> - Convert an agent to twitter mode
convert to chat <agent nr>    - Convert an agent to chat mode
import <filename>             - import a new agent from export/<filename>
export <agent nr>             - export an agent to export/agent_<name>.agent
quit                          - Exit the program
```

In chat mode every line is sent to the agent and the reply is printed as
`<name>: <reply>`; type `quit` to return to the command list. Errors are
printed and the shell carries on. The `export/` directory is not created
for you; if it is missing, exporting reports an error.

## Library use

```python
import asyncio

from toka.providers import GPT4FreeAgent, OpenAiAgent


async def demo():
    builder = GPT4FreeAgent("builder")
    builder.convert_to_coder()
    print(await builder.send_message("!build:hello_world.rs build me a hello world program"))

    chat = OpenAiAgent("assistant", api_key="placeholder")
    chat.temperature = 0.7
    chat.max_tokens = 1000
    print(await chat.send_message("Hello!"))


asyncio.run(demo())
```

### Modules

- `toka.agent`: `BaseAgent`, which can be given any endpoint URL, API key,
  system message, model and provider (the model defaults to
  `gpt-3.5-turbo`). It has `send_message`, `convert_to_chat`,
  `convert_to_coder`, `convert_to_twitter`, `add_system_msg`,
  `system_messages`, `to_dict`/`from_dict` and
  `export_to_file`/`import_from_file`. Set `client` to an
  `httpx.AsyncClient` to reuse one; otherwise a client is opened per
  request. Failures raise `AgentError`.
- `toka.providers`: `GPT4FreeAgent` (no API key), `OpenAiAgent`,
  `ClaudeAgent`, `DeepseekAgent` and `GrokAgent`, each with its endpoint URL
  and default model filled in. On these, `set_custom_provider` sets the
  model.
- `toka.models`: the dataclasses `Message`, `GPTRequest`, `GPTResponse`,
  `Choice`, `Usage` and `TwitterCredentials`.
- `toka.twitter`: `oauth1_header`, which builds an HMAC-SHA1 OAuth 1.0a
  `Authorization` value, and `post_tweet`, which raises `TwitterError` with
  the response body when the post fails.
- `toka.examples`: `build_adder` and `build_hello_world`, which turn an agent
  (a new `GPT4FreeAgent` by default) into a coder and have it write
  `output/adder.rs` or `output/hello_world.rs`; and `import_export_roundtrip`,
  which configures an agent, exports it (to `export/dummy.agent` by default),
  imports it back and raises `AgentError` if any setting differs.

### Twitter mode

```python
from toka.models import TwitterCredentials

agent.twitter_credentials = TwitterCredentials(
    consumer_key="placeholder",
    consumer_secret="secret",
    access_token="token",
    access_token_secret="secret",
)
agent.convert_to_twitter()
```

Without credentials, a twitter-mode agent raises
`AgentError("Twitter credentials not set.")`.

### Saving and loading

```python
agent.export_to_file("export/builder.agent")
again = GPT4FreeAgent.import_from_file("export/builder.agent")
```

The file is the agent's JSON form encoded in base64. It holds the name,
URL, API key, model, provider, temperature, token limit, messages, mode and
Twitter credentials. It is not encrypted.

## What toka does not do

- It does not obtain OAuth access tokens. You must already have the access
  token and secret for an X account.
- The command-line shell cannot set API keys, Twitter credentials, models or
  temperatures, and cannot create agents other than the initial `Alpha`.
  Use the library to do these things, then export the agent and load it with
  `import`.
- Every provider sends the same OpenAI-style request body and reads an
  OpenAI-style response. No endpoint-specific request formats are built.