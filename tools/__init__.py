"""Function tools bound to the deployed agents.

Each function returns a JSON string, which is what Foundry function tools
hand back to the model.
"""
