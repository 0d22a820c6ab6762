"""Embedded SDK code samples injected into the published OpenAPI document.

The production spec is generated from the API server and carries no
client-side examples. This module holds the curated snippets for the
operations that need them, keyed by ``(path, method)``.

The table is built once at import time by :func:`build_example_table`,
which rejects duplicate keys and non-operation methods, and is exposed as
:data:`SDK_EXAMPLES`, a read-only mapping::

    SDK_EXAMPLES["/v1/events"]["post"]  # -> tuple[CodeSample, ...]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from specsync.exceptions import ExampleTableError
from specsync.models import CodeSample, HTTPMethod

ExampleTable = Mapping[str, Mapping[str, tuple[CodeSample, ...]]]
"""Read-only ``path -> method -> samples`` mapping."""

SampleEntry = tuple[str, str, Iterable[CodeSample]]

_OPERATION_METHODS = frozenset(m.value for m in HTTPMethod)


def build_example_table(entries: Iterable[SampleEntry]) -> ExampleTable:
    """Build an immutable sample table from ``(path, method, samples)`` entries.

    Methods are normalised to lower case. Unlike a dict literal, which
    silently keeps the last of two identical keys, a repeated
    ``(path, method)`` pair is rejected.

    Args:
        entries: Iterable of ``(path, method, samples)`` triples.

    Returns:
        A nested :class:`~types.MappingProxyType` whose leaves are tuples of
        frozen :class:`~specsync.models.CodeSample` instances.

    Raises:
        ExampleTableError: On a duplicate key, a path not starting with
            ``/``, an unknown HTTP method, or an empty sample sequence.
    """
    table: dict[str, dict[str, tuple[CodeSample, ...]]] = {}

    for path, method, samples in entries:
        if not path.startswith("/"):
            raise ExampleTableError(f"Sample path must start with '/': {path!r}")

        method_key = method.lower()
        if method_key not in _OPERATION_METHODS:
            raise ExampleTableError(
                f"Unknown HTTP method {method!r} for {path} "
                f"(expected one of: {', '.join(sorted(_OPERATION_METHODS))})"
            )

        operations = table.setdefault(path, {})
        if method_key in operations:
            raise ExampleTableError(
                f"Duplicate code samples for {method_key.upper()} {path}"
            )

        frozen = tuple(samples)
        if not frozen:
            raise ExampleTableError(f"No code samples given for {method_key.upper()} {path}")
        operations[method_key] = frozen

    return MappingProxyType(
        {path: MappingProxyType(ops) for path, ops in table.items()}
    )


_API_KEY = "emitkit_xxxxxxxxxxxxxxxxxxxxx"


_EVENTS_SAMPLES = (
    CodeSample(
        lang="javascript",
        label="Create Event",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

const result = await client.events.create({{
  channelName: 'payments',
  title: 'Payment Received',
  description: 'User upgraded to Pro plan',
  icon: '\U0001f4b0',
  metadata: {{
    amount: 99.99,
    currency: 'USD'
  }}
}});

console.log('Event created:', result.data.id);""",
    ),
    CodeSample(
        lang="javascript",
        label="With User ID",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

await client.events.create({{
  channelName: 'user-signups',
  title: 'New User Registered',
  userId: 'user_123',
  notify: true,
  displayAs: 'notification',
  tags: ['signup', 'onboarding']
}});""",
    ),
    CodeSample(
        lang="javascript",
        label="With Idempotency",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

const result = await client.events.create(
  {{
    channelName: 'payments',
    title: 'Payment Received',
    metadata: {{ paymentId: 'pay_123' }}
  }},
  {{ idempotencyKey: 'payment-pay_123-webhook' }}
);

// Check if this was a replay
console.log('Was replayed:', result.wasReplayed);""",
    ),
    CodeSample(
        lang="bash",
        label="cURL",
        source=f"""curl -X POST https://api.emitkit.com/v1/events \\
  -H "Authorization: Bearer {_API_KEY}" \\
  -H "Content-Type: application/json" \\
  -d '{{
    "channelName": "payments",
    "title": "Payment Received",
    "description": "User upgraded to Pro plan",
    "icon": "\U0001f4b0",
    "metadata": {{
      "amount": 99.99,
      "currency": "USD"
    }}
  }}'""",
    ),
)


_IDENTIFY_SAMPLES = (
    CodeSample(
        lang="javascript",
        label="Identify User",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

await client.identify({{
  user_id: 'user_123',
  properties: {{
    email: 'john@example.com',
    name: 'John Doe',
    plan: 'pro'
  }},
  aliases: ['john@example.com', 'johndoe']
}});""",
    ),
    CodeSample(
        lang="javascript",
        label="Update Properties",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

// Properties are replaced, not merged
await client.identify({{
  user_id: 'user_123',
  properties: {{
    email: 'john@example.com',
    plan: 'enterprise',
    seats: 50,
    upgradeDate: '2025-01-20'
  }}
}});""",
    ),
    CodeSample(
        lang="javascript",
        label="Use Aliases in Events",
        source=f"""import {{ EmitKit }} from '@emitkit/js';
const client = new EmitKit('{_API_KEY}');

// First, create aliases
await client.identify({{
  user_id: 'user_123',
  properties: {{ email: 'john@example.com' }},
  aliases: ['john@example.com', 'johndoe']
}});

// Then use aliases in events - automatically resolved!
await client.events.create({{
  channelName: 'user-activity',
  title: 'User Logged In',
  userId: 'john@example.com',  // ← Alias works!
  metadata: {{ ip: '192.168.1.1' }}
}});""",
    ),
    CodeSample(
        lang="bash",
        label="cURL",
        source=f"""curl -X POST https://api.emitkit.com/v1/identify \\
  -H "Authorization: Bearer {_API_KEY}" \\
  -H "Content-Type: application/json" \\
  -d '{{
    "user_id": "user_123",
    "properties": {{
      "email": "john@example.com",
      "name": "John Doe",
      "plan": "pro"
    }},
    "aliases": [
      "john@example.com",
      "johndoe"
    ]
  }}'""",
    ),
)


SDK_EXAMPLES: ExampleTable = build_example_table(
    [
        ("/v1/events", "post", _EVENTS_SAMPLES),
        ("/v1/identify", "post", _IDENTIFY_SAMPLES),
    ]
)
"""Code samples merged into the production spec on every sync."""
