"""
ServiceBay NLU Service.

Turns one utterance (chat, transcribed speech or IVR) into a structured
understanding: entities, customer name, vehicle details, sentiment,
intent, complexity and confidence scores, and a suggested reply.
Annotation runs on spaCy and a Hugging Face sentiment model.
"""
