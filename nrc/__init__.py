"""
Nutrition Rehabilitation Center (NRC) management backend.

This package provides the REST API behind the NRC dashboard:
- Patient registration and soft deletion
- Bed allocation through the bed-assignment coordinator
- Bed request review workflow
- Medical records and visit scheduling
- Worker and anganwadi center management
- Role based notifications
"""
