def encode(config):
    """Turn a SessionConfig into the JSON object sent to the sessions endpoint.

    Unset optional fields are left out rather than sent as null.
    """
    return config.model_dump(exclude_none=True)
