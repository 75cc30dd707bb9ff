"""java2puml: Java source tree -> PlantUML class diagram."""

__version__ = "0.1.0"
