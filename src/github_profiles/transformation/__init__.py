"""
Transformation Layer - Response Bodies to Rows

Everything between the raw GitHub response text and the rows handed to the host.
- Decodes bodies and rejects error envelopes with typed errors
- Coerces objects, arrays and items envelopes into one item list
- Adds ExternalId / DisplayUrl and declares the profile table schema
"""
