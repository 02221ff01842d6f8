# chroma_client/services/__init__.py
