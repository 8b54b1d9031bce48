from .bot_io import BotIO, BotSettings, ProtocolError, parse_cells

__all__ = ['BotIO', 'BotSettings', 'ProtocolError', 'parse_cells']
