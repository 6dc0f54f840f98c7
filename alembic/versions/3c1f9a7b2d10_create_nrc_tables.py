"""Create NRC tables

Revision ID: 3c1f9a7b2d10
Revises:
Create Date: 2024-06-01 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1f9a7b2d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

patient_type = sa.Enum('child', 'pregnant', name='patient_type')
nutrition_status = sa.Enum('normal', 'malnourished', 'severely_malnourished', name='nutrition_status')
bed_status = sa.Enum('available', 'occupied', 'maintenance', name='bed_status')
urgency_level = sa.Enum('low', 'medium', 'high', 'critical', name='urgency_level')
bed_request_status = sa.Enum('pending', 'approved', 'declined', 'cancelled', name='bed_request_status')
visit_status = sa.Enum('scheduled', 'completed', 'missed', 'rescheduled', name='visit_status')
visit_type = sa.Enum('routine', 'emergency', 'follow_up', 'admission', 'discharge', name='visit_type')
appetite = sa.Enum('poor', 'moderate', 'good', name='appetite')
food_intake = sa.Enum('inadequate', 'adequate', 'excessive', name='food_intake')
worker_role = sa.Enum('head', 'supervisor', 'helper', 'asha', name='worker_role')
notification_priority = sa.Enum('low', 'medium', 'high', 'critical', name='notification_priority')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'hospitals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('contact_number', sa.String(), nullable=True),
        sa.Column('total_beds', sa.Integer(), nullable=False),
        sa.Column('nrc_equipped', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code')
    )
    op.create_index(op.f('ix_hospitals_id'), 'hospitals', ['id'], unique=False)

    op.create_table(
        'anganwadi_centers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('location_area', sa.String(), nullable=False),
        sa.Column('location_district', sa.String(), nullable=False),
        sa.Column('location_state', sa.String(), nullable=False),
        sa.Column('location_pincode', sa.String(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('supervisor_name', sa.String(), nullable=True),
        sa.Column('supervisor_contact', sa.String(), nullable=True),
        sa.Column('supervisor_employee_id', sa.String(), nullable=True),
        sa.Column('capacity_pregnant_women', sa.Integer(), nullable=False),
        sa.Column('capacity_children', sa.Integer(), nullable=False),
        sa.Column('facilities', sa.JSON(), nullable=False),
        sa.Column('coverage_areas', sa.JSON(), nullable=False),
        sa.Column('established_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_anganwadi_centers_id'), 'anganwadi_centers', ['id'], unique=False)
    op.create_index(op.f('ix_anganwadi_centers_code'), 'anganwadi_centers', ['code'], unique=True)
    op.create_index(op.f('ix_anganwadi_centers_is_active'), 'anganwadi_centers', ['is_active'], unique=False)

    # patients.bed_id gets its foreign key after beds exists (the two tables reference each other)
    op.create_table(
        'patients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('registration_number', sa.String(), nullable=False),
        sa.Column('aadhaar_number', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('type', patient_type, nullable=False),
        sa.Column('pregnancy_week', sa.Integer(), nullable=True),
        sa.Column('contact_number', sa.String(), nullable=False),
        sa.Column('emergency_contact', sa.String(), nullable=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        sa.Column('blood_pressure', sa.String(), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('hemoglobin', sa.Float(), nullable=True),
        sa.Column('nutrition_status', nutrition_status, nullable=False),
        sa.Column('medical_history', sa.JSON(), nullable=False),
        sa.Column('symptoms', sa.JSON(), nullable=False),
        sa.Column('documents', sa.JSON(), nullable=False),
        sa.Column('photos', sa.JSON(), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('risk_score', sa.Float(), nullable=False),
        sa.Column('nutritional_deficiency', sa.JSON(), nullable=False),
        sa.Column('bed_id', sa.Integer(), nullable=True),
        sa.Column('last_visit_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('next_visit_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('registered_by', sa.String(), nullable=True),
        sa.Column('registration_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('aadhaar_number')
    )
    op.create_index(op.f('ix_patients_id'), 'patients', ['id'], unique=False)
    op.create_index(op.f('ix_patients_registration_number'), 'patients', ['registration_number'], unique=True)
    op.create_index(op.f('ix_patients_nutrition_status'), 'patients', ['nutrition_status'], unique=False)
    op.create_index(op.f('ix_patients_is_active'), 'patients', ['is_active'], unique=False)

    op.create_table(
        'beds',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('hospital_id', sa.Integer(), nullable=False),
        sa.Column('number', sa.String(), nullable=False),
        sa.Column('ward', sa.String(), nullable=False),
        sa.Column('status', bed_status, nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=True),
        sa.Column('admission_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['hospital_id'], ['hospitals.id']),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('hospital_id', 'number', name='uq_beds_hospital_number')
    )
    op.create_index(op.f('ix_beds_id'), 'beds', ['id'], unique=False)
    op.create_index(op.f('ix_beds_status'), 'beds', ['status'], unique=False)

    if op.get_bind().dialect.name != 'sqlite':
        op.create_foreign_key('fk_patients_bed_id', 'patients', 'beds', ['bed_id'], ['id'])

    op.create_table(
        'bed_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('requested_by', sa.String(), nullable=True),
        sa.Column('request_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('urgency_level', urgency_level, nullable=False),
        sa.Column('medical_justification', sa.Text(), nullable=False),
        sa.Column('current_condition', sa.Text(), nullable=False),
        sa.Column('estimated_stay_duration', sa.Integer(), nullable=False),
        sa.Column('special_requirements', sa.Text(), nullable=True),
        sa.Column('status', bed_request_status, nullable=False),
        sa.Column('reviewed_by', sa.String(), nullable=True),
        sa.Column('review_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('review_comments', sa.Text(), nullable=True),
        sa.Column('hospital_referral', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_bed_requests_id'), 'bed_requests', ['id'], unique=False)
    op.create_index(op.f('ix_bed_requests_patient_id'), 'bed_requests', ['patient_id'], unique=False)
    op.create_index(op.f('ix_bed_requests_status'), 'bed_requests', ['status'], unique=False)

    op.create_table(
        'visits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('health_worker_id', sa.String(), nullable=False),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('actual_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', visit_status, nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_visits_id'), 'visits', ['id'], unique=False)
    op.create_index(op.f('ix_visits_patient_id'), 'visits', ['patient_id'], unique=False)

    op.create_table(
        'medical_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('visit_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('visit_type', visit_type, nullable=False),
        sa.Column('health_worker_id', sa.String(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('blood_pressure', sa.String(), nullable=True),
        sa.Column('pulse', sa.Integer(), nullable=True),
        sa.Column('respiratory_rate', sa.Integer(), nullable=True),
        sa.Column('oxygen_saturation', sa.Float(), nullable=True),
        sa.Column('symptoms', sa.JSON(), nullable=False),
        sa.Column('diagnosis', sa.JSON(), nullable=False),
        sa.Column('treatment', sa.JSON(), nullable=False),
        sa.Column('appetite', appetite, nullable=True),
        sa.Column('food_intake', food_intake, nullable=True),
        sa.Column('supplements', sa.JSON(), nullable=False),
        sa.Column('diet_plan', sa.Text(), nullable=True),
        sa.Column('hemoglobin', sa.Float(), nullable=True),
        sa.Column('blood_sugar', sa.Float(), nullable=True),
        sa.Column('protein_level', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('next_visit_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('follow_up_required', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['patients.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_medical_records_id'), 'medical_records', ['id'], unique=False)
    op.create_index(op.f('ix_medical_records_patient_id'), 'medical_records', ['patient_id'], unique=False)

    op.create_table(
        'workers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('role', worker_role, nullable=False),
        sa.Column('anganwadi_id', sa.Integer(), nullable=True),
        sa.Column('contact_number', sa.String(), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('assigned_areas', sa.JSON(), nullable=False),
        sa.Column('qualifications', sa.JSON(), nullable=False),
        sa.Column('working_hours_start', sa.String(), nullable=True),
        sa.Column('working_hours_end', sa.String(), nullable=True),
        sa.Column('emergency_contact_name', sa.String(), nullable=True),
        sa.Column('emergency_contact_relation', sa.String(), nullable=True),
        sa.Column('emergency_contact_number', sa.String(), nullable=True),
        sa.Column('join_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['anganwadi_id'], ['anganwadi_centers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_workers_id'), 'workers', ['id'], unique=False)
    op.create_index(op.f('ix_workers_employee_id'), 'workers', ['employee_id'], unique=True)
    op.create_index(op.f('ix_workers_role'), 'workers', ['role'], unique=False)
    op.create_index(op.f('ix_workers_anganwadi_id'), 'workers', ['anganwadi_id'], unique=False)
    op.create_index(op.f('ix_workers_is_active'), 'workers', ['is_active'], unique=False)

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_role', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('priority', notification_priority, nullable=False),
        sa.Column('action_required', sa.Boolean(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('related_entity_type', sa.String(), nullable=True),
        sa.Column('related_entity_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_notifications_id'), 'notifications', ['id'], unique=False)
    op.create_index(op.f('ix_notifications_user_role'), 'notifications', ['user_role'], unique=False)


def downgrade() -> None:
    op.drop_table('notifications')
    op.drop_table('workers')
    op.drop_table('medical_records')
    op.drop_table('visits')
    op.drop_table('bed_requests')
    if op.get_bind().dialect.name != 'sqlite':
        op.drop_constraint('fk_patients_bed_id', 'patients', type_='foreignkey')
    op.drop_table('beds')
    op.drop_table('patients')
    op.drop_table('anganwadi_centers')
    op.drop_table('hospitals')

    bind = op.get_bind()
    for enum_type in (
        notification_priority, worker_role, food_intake, appetite, visit_type,
        visit_status, bed_request_status, urgency_level, bed_status,
        nutrition_status, patient_type,
    ):
        enum_type.drop(bind, checkfirst=True)
