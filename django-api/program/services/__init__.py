from program.services.program_service import ProgramService

__all__ = ["ProgramService"]
