"""An arena for playing Passo between humans and computer agents."""

__version__ = "0.1.0"