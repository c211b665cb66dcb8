#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Users - super admin, organizer and a regular user
2. Create Events - two events (one featured) with ticket types and a lineup

Notes:
- Run `python script/reset_database.py` first for a clean schema
- Data goes through the same use cases the API uses, so validation applies
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import text, update

from src.platform.database.orm_db_setting import Database
from src.service.partier.app.command.manage_event_use_case import ManageEventUseCase
from src.service.partier.app.command.manage_ticket_type_use_case import ManageTicketTypeUseCase
from src.service.partier.app.command.register_user_use_case import RegisterUserUseCase
from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.partier.driven_adapter.model.user_model import UserModel
from src.service.partier.driven_adapter.repo.event_catalog_command_repo_impl import (
    EventCatalogCommandRepoImpl,
)
from src.service.partier.driven_adapter.repo.event_catalog_query_repo_impl import (
    EventCatalogQueryRepoImpl,
)
from src.service.partier.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.partier.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.partier.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class UserConfig:
    """User seed configuration"""

    username: str
    email: str
    full_name: str
    is_organizer: bool = False
    is_super_admin: bool = False


# Demo users to create
DEMO_USERS = [
    UserConfig('admin', 'admin@partier.local', 'Party Admin', True, True),
    UserConfig('organizer', 'organizer@partier.local', 'Night Owl Events', True),
    UserConfig('raver', 'raver@partier.local', 'Riley Raver'),
]


async def create_users(database: Database) -> int:
    """Create demo users

    Returns:
        int: organizer id
    """
    print(f'👥 Creating {len(DEMO_USERS)} users...')

    register = RegisterUserUseCase(
        user_command_repo=UserCommandRepoImpl(database.session),
        user_query_repo=UserQueryRepoImpl(database.session),
        password_hasher=BcryptPasswordHasher(),
    )

    organizer_id = None
    for config in DEMO_USERS:
        user = await register.register(
            username=config.username,
            password=DEFAULT_PASSWORD,
            email=config.email,
            full_name=config.full_name,
            is_organizer=config.is_organizer,
        )
        if config.is_super_admin:
            # No API creates super admins; promote directly
            async with database.session() as session:
                await session.execute(
                    update(UserModel).where(UserModel.id == user.id).values(is_super_admin=True)
                )
                await session.commit()

        print(f'   ✅ Created {config.username}: ID={user.id}, Email={user.email}')
        if config.is_organizer and not config.is_super_admin:
            organizer_id = user.id

    if organizer_id is None:
        raise RuntimeError('Failed to create organizer: ID is None')

    print(f'   📧 Password for every account: {DEFAULT_PASSWORD}')
    return organizer_id


async def create_events(database: Database, organizer_id: int) -> None:
    print('🎉 Creating events...')

    command_repo = EventCatalogCommandRepoImpl(database.session)
    query_repo = EventCatalogQueryRepoImpl(database.session)
    manage_event = ManageEventUseCase(event_catalog_command_repo=command_repo)
    manage_ticket_type = ManageTicketTypeUseCase(
        event_catalog_command_repo=command_repo,
        event_catalog_query_repo=query_repo,
    )

    next_week = datetime.now(timezone.utc).replace(
        hour=22, minute=0, second=0, microsecond=0
    ) + timedelta(days=7)

    events = [
        (
            EventEntity(
                title='Neon Nights',
                description='Synthwave and techno until sunrise',
                image_url='https://images.partier.local/neon-nights.jpg',
                date=next_week,
                location='The Warehouse',
                address='12 Dock Street',
                organized_by_id=organizer_id,
                featured=True,
                tags=['techno', 'synthwave'],
            ),
            [('General Admission', 'Dance floor access', Decimal('25.00'), 300),
             ('VIP', 'Balcony, fast lane entry', Decimal('80.00'), 40)],
            [('DJ Aurora', '23:00', True), ('Pulse Collective', '21:30', False)],
        ),
        (
            EventEntity(
                title='Rooftop Sessions',
                description='Deep house with a skyline view',
                image_url='https://images.partier.local/rooftop.jpg',
                date=next_week + timedelta(days=7),
                location='Skyline Terrace',
                address='400 Harbor Ave, Floor 30',
                organized_by_id=organizer_id,
                tags=['house'],
            ),
            [('Early Bird', 'Limited release', Decimal('15.00'), 50)],
            [('Marea', '20:00', True)],
        ),
    ]

    for event, ticket_types, performers in events:
        created = await manage_event.create(event=event)
        assert created.id is not None
        print(f'   ✅ Created event: ID={created.id}, Title={created.title}')

        for name, description, price, available in ticket_types:
            await manage_ticket_type.create_ticket_type(
                ticket_type=TicketTypeEntity(
                    event_id=created.id,
                    name=name,
                    description=description,
                    price=price,
                    available=available,
                )
            )
        for name, time, is_headliner in performers:
            await manage_ticket_type.create_performer(
                performer=PerformerEntity(
                    event_id=created.id,
                    name=name,
                    image_url='',
                    time=time,
                    is_headliner=is_headliner,
                )
            )
        print(f'      🎟️ {len(ticket_types)} ticket types, 🎤 {len(performers)} performers')


async def verify_data(database: Database) -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with database.session() as session:
        for table in ['user', 'event', 'ticket_type', 'performer', 'ticket']:
            result = await session.execute(text(f'SELECT COUNT(*) FROM "{table}"'))
            print(f'   {table} count: {result.scalar()}')

    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = Database()
    try:
        organizer_id = await create_users(database)
        print()
        await create_events(database, organizer_id)
        print()
        await verify_data(database)
    finally:
        await database.dispose()

    print()
    print('=' * 50)
    print('🌱 Data seeding completed!')
    print('📋 Accounts: admin / organizer / raver')


if __name__ == '__main__':
    asyncio.run(main())
