from .calculator import CalculatorSession, Entry, AssignmentError, is_valid_variable_name

__all__ = ['CalculatorSession', 'Entry', 'AssignmentError', 'is_valid_variable_name']
