from carlog.models.logs import FuelLog, ServiceLog
from carlog.services.vehicle_records import VehicleRecordService

class FuelLogService(VehicleRecordService):
    """Fuel logs, newest fill-up first."""
    model = FuelLog
    label = "Fuel log"

class ServiceLogService(VehicleRecordService):
    """Service logs, most recent service first."""
    model = ServiceLog
    label = "Service log"
