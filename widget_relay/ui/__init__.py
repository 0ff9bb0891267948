"""NiceGUI chat widget - thin presentation layer over the relay endpoint.

Responsibilities:
    - Transcript of user, file and bot bubbles
    - Message input and single-file upload
    - Optimistic "Thinking..." placeholder updated when the reply arrives

Submit logic lives in ``client`` so it can run without a browser.
"""
