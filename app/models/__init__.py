
from app.models.specialization import Specialization
from app.models.service import Service
from app.models.patient import Patient, Gender
from app.models.doctor import Doctor
from app.models.appointment import Appointment, AppointmentStatus
